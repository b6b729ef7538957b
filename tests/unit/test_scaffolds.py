import json

import pytest

from appforger.generator import generate_scaffold, validate_generated_files
from appforger.generator.scaffolds import generate_mobile_scaffold, generate_web_scaffold
from appforger.generator.scaffolds.common import safe_name
from appforger.models import ProjectType

PROJECT_ID = "0b5e2a8c-7f61-4c3e-9d2a-5a1b7e9c4f10"


def test_safe_name():
    assert safe_name("My Notes App!") == "mynotesapp"
    assert safe_name("Café 2") == "caf2"


@pytest.mark.parametrize("app_type", list(ProjectType))
def test_scaffold_is_deterministic(app_type):
    first = generate_scaffold(app_type, PROJECT_ID, "Notes")
    second = generate_scaffold(app_type, PROJECT_ID, "Notes")

    assert first == second


@pytest.mark.parametrize("app_type", list(ProjectType))
def test_scaffold_satisfies_generation_contract(app_type):
    files = generate_scaffold(app_type, PROJECT_ID, "Notes")

    assert validate_generated_files(files, app_type) == files


def test_mobile_scaffold():
    files = generate_mobile_scaffold(PROJECT_ID, "My Notes")

    assert len(files) == 14
    package = json.loads(files["package.json"])
    assert package["name"] == "mynotes-mobile"
    assert package["main"] == "expo-router/entry"

    app = json.loads(files["app.json"])["expo"]
    assert app["name"] == "My Notes"
    assert app["slug"] == "mynotes"
    assert app["extra"]["eas"]["projectId"] == PROJECT_ID
    assert "app/(app)/note/[id].tsx" in files


def test_web_scaffold():
    files = generate_web_scaffold(PROJECT_ID, "My Notes")

    assert len(files) == 12
    assert json.loads(files["package.json"])["name"] == "mynotes-web"
    assert json.loads(files["vercel.json"]) == {"framework": "nextjs"}
    assert 'title: "My Notes"' in files["src/app/layout.tsx"]
    assert "My Notes" in files["src/app/page.tsx"]
    assert "$" not in files["src/app/page.tsx"]


def test_each_type_gets_its_own_layout():
    web = generate_scaffold(ProjectType.WEB, PROJECT_ID, "Notes")
    mobile = generate_scaffold(ProjectType.MOBILE, PROJECT_ID, "Notes")

    assert "next.config.js" in web
    assert "app.json" in mobile
