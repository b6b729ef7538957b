"""Deterministic Expo React Native scaffold: an authenticated notes app."""

import json

from appforger.schemas.generation import FileSet

from .common import safe_name

ROOT_LAYOUT = """import { Stack } from "expo-router";
import { StatusBar } from "expo-status-bar";

export default function RootLayout() {
  return (
    <>
      <StatusBar style="auto" />
      <Stack screenOptions={{ headerShown: false }}>
        <Stack.Screen name="(auth)" />
        <Stack.Screen name="(app)" />
      </Stack>
    </>
  );
}
"""

AUTH_LAYOUT = """import { Stack } from "expo-router";

export default function AuthLayout() {
  return (
    <Stack screenOptions={{ headerShown: false }}>
      <Stack.Screen name="login" />
      <Stack.Screen name="register" />
    </Stack>
  );
}
"""

AUTH_STYLES = """const styles = StyleSheet.create({
  container: { flex: 1, padding: 24, justifyContent: "center", backgroundColor: "#fff" },
  title: { fontSize: 32, fontWeight: "bold", marginBottom: 8 },
  subtitle: { fontSize: 16, color: "#666", marginBottom: 32 },
  input: {
    borderWidth: 1,
    borderColor: "#ddd",
    borderRadius: 8,
    padding: 16,
    marginBottom: 16,
    fontSize: 16,
  },
  button: {
    backgroundColor: "#007AFF",
    borderRadius: 8,
    padding: 16,
    alignItems: "center",
    marginTop: 8,
  },
  buttonDisabled: { opacity: 0.6 },
  buttonText: { color: "#fff", fontSize: 16, fontWeight: "600" },
  linkButton: { marginTop: 24, alignItems: "center" },
  linkText: { color: "#007AFF", fontSize: 14 },
});
"""

LOGIN_SCREEN = """import { useState } from "react";
import { View, Text, TextInput, TouchableOpacity, StyleSheet, Alert } from "react-native";
import { Link, router } from "expo-router";
import { supabase } from "@/lib/supabase";

export default function LoginScreen() {
  const [email, setEmail] = useState("");
  const [password, setPassword] = useState("");
  const [loading, setLoading] = useState(false);

  async function handleLogin() {
    if (!email || !password) {
      Alert.alert("Error", "Please fill in all fields");
      return;
    }

    setLoading(true);
    const { error } = await supabase.auth.signInWithPassword({ email, password });

    if (error) {
      Alert.alert("Error", error.message);
    } else {
      router.replace("/(app)/notes");
    }
    setLoading(false);
  }

  return (
    <View style={styles.container}>
      <Text style={styles.title}>Welcome Back</Text>
      <Text style={styles.subtitle}>Sign in to continue</Text>

      <TextInput
        style={styles.input}
        placeholder="Email"
        value={email}
        onChangeText={setEmail}
        keyboardType="email-address"
        autoCapitalize="none"
      />

      <TextInput
        style={styles.input}
        placeholder="Password"
        value={password}
        onChangeText={setPassword}
        secureTextEntry
      />

      <TouchableOpacity
        style={[styles.button, loading && styles.buttonDisabled]}
        onPress={handleLogin}
        disabled={loading}
      >
        <Text style={styles.buttonText}>{loading ? "Signing in..." : "Sign In"}</Text>
      </TouchableOpacity>

      <Link href="/(auth)/register" asChild>
        <TouchableOpacity style={styles.linkButton}>
          <Text style={styles.linkText}>Don't have an account? Sign up</Text>
        </TouchableOpacity>
      </Link>
    </View>
  );
}

""" + AUTH_STYLES

REGISTER_SCREEN = """import { useState } from "react";
import { View, Text, TextInput, TouchableOpacity, StyleSheet, Alert } from "react-native";
import { Link, router } from "expo-router";
import { supabase } from "@/lib/supabase";

export default function RegisterScreen() {
  const [email, setEmail] = useState("");
  const [password, setPassword] = useState("");
  const [confirmPassword, setConfirmPassword] = useState("");
  const [loading, setLoading] = useState(false);

  async function handleRegister() {
    if (!email || !password || !confirmPassword) {
      Alert.alert("Error", "Please fill in all fields");
      return;
    }

    if (password !== confirmPassword) {
      Alert.alert("Error", "Passwords do not match");
      return;
    }

    setLoading(true);
    const { error } = await supabase.auth.signUp({ email, password });

    if (error) {
      Alert.alert("Error", error.message);
    } else {
      Alert.alert("Success", "Check your email to confirm your account");
      router.replace("/(auth)/login");
    }
    setLoading(false);
  }

  return (
    <View style={styles.container}>
      <Text style={styles.title}>Create Account</Text>
      <Text style={styles.subtitle}>Sign up to get started</Text>

      <TextInput
        style={styles.input}
        placeholder="Email"
        value={email}
        onChangeText={setEmail}
        keyboardType="email-address"
        autoCapitalize="none"
      />

      <TextInput
        style={styles.input}
        placeholder="Password"
        value={password}
        onChangeText={setPassword}
        secureTextEntry
      />

      <TextInput
        style={styles.input}
        placeholder="Confirm Password"
        value={confirmPassword}
        onChangeText={setConfirmPassword}
        secureTextEntry
      />

      <TouchableOpacity
        style={[styles.button, loading && styles.buttonDisabled]}
        onPress={handleRegister}
        disabled={loading}
      >
        <Text style={styles.buttonText}>{loading ? "Creating account..." : "Sign Up"}</Text>
      </TouchableOpacity>

      <Link href="/(auth)/login" asChild>
        <TouchableOpacity style={styles.linkButton}>
          <Text style={styles.linkText}>Already have an account? Sign in</Text>
        </TouchableOpacity>
      </Link>
    </View>
  );
}

""" + AUTH_STYLES

APP_LAYOUT = """import { useEffect } from "react";
import { Stack, router } from "expo-router";
import { supabase } from "@/lib/supabase";

export default function AppLayout() {
  useEffect(() => {
    supabase.auth.getSession().then(({ data: { session } }) => {
      if (!session) {
        router.replace("/(auth)/login");
      }
    });

    const {
      data: { subscription },
    } = supabase.auth.onAuthStateChange((_event, session) => {
      if (!session) {
        router.replace("/(auth)/login");
      }
    });

    return () => subscription.unsubscribe();
  }, []);

  return (
    <Stack>
      <Stack.Screen name="notes" options={{ title: "My Notes", headerShown: true }} />
      <Stack.Screen name="note/[id]" options={{ title: "Note", headerShown: true }} />
    </Stack>
  );
}
"""

NOTES_SCREEN = """import { useState, useCallback } from "react";
import {
  View,
  Text,
  FlatList,
  TouchableOpacity,
  StyleSheet,
  Alert,
  TextInput,
} from "react-native";
import { router, useFocusEffect } from "expo-router";
import { supabase } from "@/lib/supabase";

interface Note {
  id: string;
  title: string;
  content: string;
  created_at: string;
}

export default function NotesScreen() {
  const [notes, setNotes] = useState<Note[]>([]);
  const [loading, setLoading] = useState(true);
  const [showNewNote, setShowNewNote] = useState(false);
  const [newTitle, setNewTitle] = useState("");
  const [newContent, setNewContent] = useState("");

  async function fetchNotes() {
    const {
      data: { user },
    } = await supabase.auth.getUser();
    if (!user) return;

    const { data, error } = await supabase
      .from("notes")
      .select("*")
      .eq("user_id", user.id)
      .order("created_at", { ascending: false });

    if (error) {
      Alert.alert("Error", error.message);
    } else {
      setNotes(data || []);
    }
    setLoading(false);
  }

  useFocusEffect(
    useCallback(() => {
      fetchNotes();
    }, [])
  );

  async function handleCreateNote() {
    if (!newTitle.trim()) {
      Alert.alert("Error", "Please enter a title");
      return;
    }

    const {
      data: { user },
    } = await supabase.auth.getUser();
    if (!user) return;

    const { error } = await supabase.from("notes").insert({
      user_id: user.id,
      title: newTitle,
      content: newContent,
    });

    if (error) {
      Alert.alert("Error", error.message);
    } else {
      setNewTitle("");
      setNewContent("");
      setShowNewNote(false);
      fetchNotes();
    }
  }

  async function handleDeleteNote(id: string) {
    Alert.alert("Delete Note", "Are you sure you want to delete this note?", [
      { text: "Cancel", style: "cancel" },
      {
        text: "Delete",
        style: "destructive",
        onPress: async () => {
          const { error } = await supabase.from("notes").delete().eq("id", id);
          if (error) {
            Alert.alert("Error", error.message);
          } else {
            fetchNotes();
          }
        },
      },
    ]);
  }

  async function handleSignOut() {
    await supabase.auth.signOut();
    router.replace("/(auth)/login");
  }

  return (
    <View style={styles.container}>
      <View style={styles.header}>
        <TouchableOpacity style={styles.addButton} onPress={() => setShowNewNote(!showNewNote)}>
          <Text style={styles.addButtonText}>{showNewNote ? "Cancel" : "+ New Note"}</Text>
        </TouchableOpacity>
        <TouchableOpacity onPress={handleSignOut}>
          <Text style={styles.signOutText}>Sign Out</Text>
        </TouchableOpacity>
      </View>

      {showNewNote && (
        <View style={styles.newNoteForm}>
          <TextInput
            style={styles.input}
            placeholder="Title"
            value={newTitle}
            onChangeText={setNewTitle}
          />
          <TextInput
            style={[styles.input, styles.contentInput]}
            placeholder="Content"
            value={newContent}
            onChangeText={setNewContent}
            multiline
          />
          <TouchableOpacity style={styles.saveButton} onPress={handleCreateNote}>
            <Text style={styles.saveButtonText}>Save Note</Text>
          </TouchableOpacity>
        </View>
      )}

      {loading ? (
        <Text style={styles.mutedText}>Loading...</Text>
      ) : notes.length === 0 ? (
        <Text style={styles.mutedText}>No notes yet. Create one!</Text>
      ) : (
        <FlatList
          data={notes}
          keyExtractor={(item) => item.id}
          renderItem={({ item }) => (
            <TouchableOpacity
              style={styles.noteItem}
              onPress={() => router.push(`/(app)/note/${item.id}`)}
              onLongPress={() => handleDeleteNote(item.id)}
            >
              <Text style={styles.noteTitle}>{item.title}</Text>
              <Text style={styles.noteContent} numberOfLines={2}>
                {item.content}
              </Text>
              <Text style={styles.noteDate}>
                {new Date(item.created_at).toLocaleDateString()}
              </Text>
            </TouchableOpacity>
          )}
        />
      )}
    </View>
  );
}

const styles = StyleSheet.create({
  container: { flex: 1, backgroundColor: "#f5f5f5" },
  header: {
    flexDirection: "row",
    justifyContent: "space-between",
    alignItems: "center",
    padding: 16,
    backgroundColor: "#fff",
    borderBottomWidth: 1,
    borderBottomColor: "#eee",
  },
  addButton: {
    backgroundColor: "#007AFF",
    paddingHorizontal: 16,
    paddingVertical: 8,
    borderRadius: 8,
  },
  addButtonText: { color: "#fff", fontWeight: "600" },
  signOutText: { color: "#FF3B30", fontWeight: "500" },
  newNoteForm: {
    backgroundColor: "#fff",
    padding: 16,
    borderBottomWidth: 1,
    borderBottomColor: "#eee",
  },
  input: {
    borderWidth: 1,
    borderColor: "#ddd",
    borderRadius: 8,
    padding: 12,
    marginBottom: 12,
    fontSize: 16,
  },
  contentInput: { height: 100, textAlignVertical: "top" },
  saveButton: { backgroundColor: "#34C759", padding: 12, borderRadius: 8, alignItems: "center" },
  saveButtonText: { color: "#fff", fontWeight: "600" },
  mutedText: { textAlign: "center", marginTop: 32, color: "#666", fontSize: 16 },
  noteItem: {
    backgroundColor: "#fff",
    padding: 16,
    marginHorizontal: 16,
    marginTop: 12,
    borderRadius: 8,
  },
  noteTitle: { fontSize: 18, fontWeight: "600", marginBottom: 4 },
  noteContent: { fontSize: 14, color: "#666", marginBottom: 8 },
  noteDate: { fontSize: 12, color: "#999" },
});
"""

NOTE_DETAIL_SCREEN = """import { useState, useEffect } from "react";
import { Text, TextInput, TouchableOpacity, StyleSheet, Alert, ScrollView } from "react-native";
import { useLocalSearchParams, router } from "expo-router";
import { supabase } from "@/lib/supabase";

interface Note {
  id: string;
  title: string;
  content: string;
  created_at: string;
  updated_at: string;
}

export default function NoteDetailScreen() {
  const { id } = useLocalSearchParams<{ id: string }>();
  const [note, setNote] = useState<Note | null>(null);
  const [title, setTitle] = useState("");
  const [content, setContent] = useState("");
  const [loading, setLoading] = useState(true);
  const [saving, setSaving] = useState(false);

  useEffect(() => {
    fetchNote();
  }, [id]);

  async function fetchNote() {
    const { data, error } = await supabase.from("notes").select("*").eq("id", id).single();

    if (error) {
      Alert.alert("Error", error.message);
      router.back();
    } else {
      setNote(data);
      setTitle(data.title);
      setContent(data.content);
    }
    setLoading(false);
  }

  async function handleSave() {
    if (!title.trim()) {
      Alert.alert("Error", "Please enter a title");
      return;
    }

    setSaving(true);
    const { error } = await supabase
      .from("notes")
      .update({ title, content, updated_at: new Date().toISOString() })
      .eq("id", id);

    if (error) {
      Alert.alert("Error", error.message);
    } else {
      Alert.alert("Success", "Note saved");
    }
    setSaving(false);
  }

  if (loading) {
    return <Text style={styles.loadingText}>Loading...</Text>;
  }

  return (
    <ScrollView style={styles.container}>
      <TextInput style={styles.titleInput} placeholder="Title" value={title} onChangeText={setTitle} />

      <TextInput
        style={styles.contentInput}
        placeholder="Write your note..."
        value={content}
        onChangeText={setContent}
        multiline
        textAlignVertical="top"
      />

      <TouchableOpacity
        style={[styles.saveButton, saving && styles.saveButtonDisabled]}
        onPress={handleSave}
        disabled={saving}
      >
        <Text style={styles.saveButtonText}>{saving ? "Saving..." : "Save Changes"}</Text>
      </TouchableOpacity>

      {note && (
        <Text style={styles.timestamp}>
          Last updated: {new Date(note.updated_at || note.created_at).toLocaleString()}
        </Text>
      )}
    </ScrollView>
  );
}

const styles = StyleSheet.create({
  container: { flex: 1, backgroundColor: "#fff", padding: 16 },
  loadingText: { textAlign: "center", marginTop: 32, color: "#666" },
  titleInput: {
    fontSize: 24,
    fontWeight: "bold",
    marginBottom: 16,
    padding: 8,
    borderBottomWidth: 1,
    borderBottomColor: "#eee",
  },
  contentInput: { fontSize: 16, lineHeight: 24, minHeight: 300, padding: 8 },
  saveButton: {
    backgroundColor: "#007AFF",
    padding: 16,
    borderRadius: 8,
    alignItems: "center",
    marginTop: 16,
  },
  saveButtonDisabled: { opacity: 0.6 },
  saveButtonText: { color: "#fff", fontSize: 16, fontWeight: "600" },
  timestamp: { textAlign: "center", color: "#999", fontSize: 12, marginTop: 16, marginBottom: 32 },
});
"""

INDEX_SCREEN = """import { useEffect } from "react";
import { router } from "expo-router";
import { View, ActivityIndicator, StyleSheet } from "react-native";
import { supabase } from "@/lib/supabase";

export default function Index() {
  useEffect(() => {
    supabase.auth.getSession().then(({ data: { session } }) => {
      router.replace(session ? "/(app)/notes" : "/(auth)/login");
    });
  }, []);

  return (
    <View style={styles.container}>
      <ActivityIndicator size="large" color="#007AFF" />
    </View>
  );
}

const styles = StyleSheet.create({
  container: { flex: 1, justifyContent: "center", alignItems: "center", backgroundColor: "#fff" },
});
"""

SUPABASE_CLIENT = """import "react-native-url-polyfill/dist/polyfill";
import AsyncStorage from "@react-native-async-storage/async-storage";
import { createClient } from "@supabase/supabase-js";

const supabaseUrl = process.env.EXPO_PUBLIC_SUPABASE_URL || "";
const supabaseAnonKey = process.env.EXPO_PUBLIC_SUPABASE_ANON_KEY || "";

export const supabase = createClient(supabaseUrl, supabaseAnonKey, {
  auth: {
    storage: AsyncStorage,
    autoRefreshToken: true,
    persistSession: true,
    detectSessionInUrl: false,
  },
});
"""

ENV_EXAMPLE = """EXPO_PUBLIC_SUPABASE_URL=your_supabase_url
EXPO_PUBLIC_SUPABASE_ANON_KEY=your_supabase_anon_key
"""

BABEL_CONFIG = """module.exports = function (api) {
  api.cache(true);
  return {
    presets: ["babel-preset-expo"],
  };
};
"""


def _package_json(name: str) -> dict:
    return {
        "name": f"{name}-mobile",
        "version": "1.0.0",
        "main": "expo-router/entry",
        "scripts": {
            "start": "expo start",
            "android": "expo start --android",
            "ios": "expo start --ios",
            "web": "expo start --web",
        },
        "dependencies": {
            "@supabase/supabase-js": "^2.45.0",
            "@react-native-async-storage/async-storage": "1.23.1",
            "expo": "~51.0.28",
            "expo-router": "~3.5.23",
            "expo-status-bar": "~1.12.1",
            "react": "18.2.0",
            "react-native": "0.74.5",
            "react-native-safe-area-context": "4.10.5",
            "react-native-screens": "3.31.1",
            "react-native-url-polyfill": "^2.0.0",
        },
        "devDependencies": {
            "@babel/core": "^7.20.0",
            "@types/react": "~18.2.45",
            "typescript": "~5.3.3",
        },
        "private": True,
    }


def _app_json(project_id: str, project_name: str, name: str) -> dict:
    return {
        "expo": {
            "name": project_name,
            "slug": name,
            "version": "1.0.0",
            "orientation": "portrait",
            "scheme": name,
            "userInterfaceStyle": "automatic",
            "splash": {"resizeMode": "contain", "backgroundColor": "#ffffff"},
            "assetBundlePatterns": ["**/*"],
            "ios": {"supportsTablet": True},
            "android": {"adaptiveIcon": {"backgroundColor": "#ffffff"}},
            "web": {"bundler": "metro", "output": "static"},
            "plugins": ["expo-router"],
            "extra": {"eas": {"projectId": project_id}},
        }
    }


def _tsconfig() -> dict:
    return {
        "extends": "expo/tsconfig.base",
        "compilerOptions": {"strict": True, "paths": {"@/*": ["./*"]}},
        "include": ["**/*.ts", "**/*.tsx", ".expo/types/**/*.ts", "expo-env.d.ts"],
    }


def generate_mobile_scaffold(project_id: str, project_name: str) -> FileSet:
    """Build the Expo Router file set. Pure function of its inputs."""
    name = safe_name(project_name)
    return {
        "package.json": json.dumps(_package_json(name), indent=2),
        "app.json": json.dumps(_app_json(project_id, project_name, name), indent=2),
        "tsconfig.json": json.dumps(_tsconfig(), indent=2),
        "app/_layout.tsx": ROOT_LAYOUT,
        "app/(auth)/_layout.tsx": AUTH_LAYOUT,
        "app/(auth)/login.tsx": LOGIN_SCREEN,
        "app/(auth)/register.tsx": REGISTER_SCREEN,
        "app/(app)/_layout.tsx": APP_LAYOUT,
        "app/(app)/notes.tsx": NOTES_SCREEN,
        "app/(app)/note/[id].tsx": NOTE_DETAIL_SCREEN,
        "app/index.tsx": INDEX_SCREEN,
        "lib/supabase.ts": SUPABASE_CLIENT,
        ".env.example": ENV_EXAMPLE,
        "babel.config.js": BABEL_CONFIG,
    }
