"""Deterministic Next.js web scaffold."""

import json
from string import Template

from appforger.schemas.generation import FileSet

from .common import safe_name

NEXT_CONFIG = """/** @type {import('next').NextConfig} */
const nextConfig = {
  reactStrictMode: true,
};

module.exports = nextConfig;
"""

TAILWIND_CONFIG = """import type { Config } from "tailwindcss";

const config: Config = {
  content: [
    "./src/pages/**/*.{js,ts,jsx,tsx,mdx}",
    "./src/components/**/*.{js,ts,jsx,tsx,mdx}",
    "./src/app/**/*.{js,ts,jsx,tsx,mdx}",
  ],
  theme: {
    extend: {},
  },
  plugins: [],
};

export default config;
"""

POSTCSS_CONFIG = """module.exports = {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
};
"""

GLOBALS_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

LAYOUT = Template("""import type { Metadata } from "next";
import "./globals.css";

export const metadata: Metadata = {
  title: "$project_name",
  description: "Web companion for $project_name mobile app",
};

export default function RootLayout({
  children,
}: {
  children: React.ReactNode;
}) {
  return (
    <html lang="en">
      <body className="min-h-screen bg-gray-50 antialiased">{children}</body>
    </html>
  );
}
""")

FEATURE_CARD = Template("""          <div className="bg-white p-8 rounded-xl shadow-sm">
            <div className="w-12 h-12 bg-$color-100 rounded-lg mb-4" />
            <h3 className="text-xl font-semibold mb-2">$title</h3>
            <p className="text-gray-600">$text</p>
          </div>
""")

FEATURES = (
    (
        "blue",
        "Mobile First",
        "Beautiful native mobile app for iOS and Android with offline support.",
    ),
    ("green", "Real-time Sync", "Your notes sync instantly across all your devices."),
    ("purple", "Secure", "End-to-end encryption keeps your notes private and secure."),
)

HOME_PAGE = Template("""import Link from "next/link";

export default function Home() {
  return (
    <main className="min-h-screen bg-gradient-to-b from-blue-50 to-white">
      <div className="container mx-auto px-4 py-16">
        <nav className="flex justify-between items-center mb-16">
          <h1 className="text-2xl font-bold text-gray-900">$project_name</h1>
          <div className="flex gap-4">
            <Link href="/signin" className="text-gray-600 hover:text-gray-900 px-4 py-2">
              Sign In
            </Link>
            <Link
              href="/signup"
              className="bg-blue-600 text-white px-4 py-2 rounded-lg hover:bg-blue-700"
            >
              Get Started
            </Link>
          </div>
        </nav>

        <div className="text-center max-w-3xl mx-auto">
          <h2 className="text-5xl font-bold text-gray-900 mb-6">Your Notes, Everywhere</h2>
          <p className="text-xl text-gray-600 mb-8">
            Access your notes from anywhere. Sync seamlessly between your mobile app
            and web browser.
          </p>
          <div className="flex gap-4 justify-center">
            <Link
              href="/signup"
              className="bg-blue-600 text-white px-8 py-3 rounded-lg text-lg font-medium hover:bg-blue-700"
            >
              Start Free
            </Link>
            <a
              href="#features"
              className="border border-gray-300 text-gray-700 px-8 py-3 rounded-lg text-lg font-medium hover:bg-gray-50"
            >
              Learn More
            </a>
          </div>
        </div>

        <section id="features" className="mt-32 grid md:grid-cols-3 gap-8">
$features        </section>
      </div>
    </main>
  );
}
""")

SUPABASE_BROWSER_CLIENT = """import { createBrowserClient } from "@supabase/ssr";

export function createClient() {
  return createBrowserClient(
    process.env.NEXT_PUBLIC_SUPABASE_URL!,
    process.env.NEXT_PUBLIC_SUPABASE_ANON_KEY!
  );
}
"""

SUPABASE_SERVER_CLIENT = """import { createServerClient, type CookieOptions } from "@supabase/ssr";
import { cookies } from "next/headers";

export async function createClient() {
  const cookieStore = await cookies();

  return createServerClient(
    process.env.NEXT_PUBLIC_SUPABASE_URL!,
    process.env.NEXT_PUBLIC_SUPABASE_ANON_KEY!,
    {
      cookies: {
        getAll() {
          return cookieStore.getAll();
        },
        setAll(cookiesToSet: { name: string; value: string; options: CookieOptions }[]) {
          try {
            cookiesToSet.forEach(({ name, value, options }) =>
              cookieStore.set(name, value, options)
            );
          } catch {
            // Called from a Server Component; middleware refreshes the session
          }
        },
      },
    }
  );
}
"""

ENV_EXAMPLE = """NEXT_PUBLIC_SUPABASE_URL=your_supabase_url
NEXT_PUBLIC_SUPABASE_ANON_KEY=your_supabase_anon_key
"""


def _package_json(name: str) -> dict:
    return {
        "name": f"{name}-web",
        "version": "1.0.0",
        "private": True,
        "scripts": {
            "dev": "next dev",
            "build": "next build",
            "start": "next start",
            "lint": "next lint",
        },
        "dependencies": {
            "@supabase/supabase-js": "^2.45.0",
            "@supabase/ssr": "^0.5.1",
            "next": "14.2.5",
            "react": "^18.3.1",
            "react-dom": "^18.3.1",
        },
        "devDependencies": {
            "@types/node": "^22.5.4",
            "@types/react": "^18.3.5",
            "@types/react-dom": "^18.3.0",
            "autoprefixer": "^10.4.20",
            "postcss": "^8.4.45",
            "tailwindcss": "^3.4.10",
            "typescript": "~5.5.4",
        },
    }


def _tsconfig() -> dict:
    return {
        "compilerOptions": {
            "lib": ["dom", "dom.iterable", "esnext"],
            "allowJs": True,
            "skipLibCheck": True,
            "strict": True,
            "noEmit": True,
            "esModuleInterop": True,
            "module": "esnext",
            "moduleResolution": "bundler",
            "resolveJsonModule": True,
            "isolatedModules": True,
            "jsx": "preserve",
            "incremental": True,
            "plugins": [{"name": "next"}],
            "paths": {"@/*": ["./src/*"]},
        },
        "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
        "exclude": ["node_modules"],
    }


def generate_web_scaffold(project_id: str, project_name: str) -> FileSet:
    """Build the Next.js file set. Pure function of its inputs."""
    features = "".join(
        FEATURE_CARD.substitute(color=color, title=title, text=text)
        for color, title, text in FEATURES
    )
    return {
        "package.json": json.dumps(_package_json(safe_name(project_name)), indent=2),
        "next.config.js": NEXT_CONFIG,
        "tsconfig.json": json.dumps(_tsconfig(), indent=2),
        "tailwind.config.ts": TAILWIND_CONFIG,
        "postcss.config.js": POSTCSS_CONFIG,
        "src/app/globals.css": GLOBALS_CSS,
        "src/app/layout.tsx": LAYOUT.substitute(project_name=project_name),
        "src/app/page.tsx": HOME_PAGE.substitute(project_name=project_name, features=features),
        "src/lib/supabase/client.ts": SUPABASE_BROWSER_CLIENT,
        "src/lib/supabase/server.ts": SUPABASE_SERVER_CLIENT,
        ".env.example": ENV_EXAMPLE,
        "vercel.json": json.dumps({"framework": "nextjs"}, indent=2),
    }
