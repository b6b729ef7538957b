import re


def safe_name(project_name: str) -> str:
    """Lowercased project name with everything but ASCII letters and digits dropped."""
    return re.sub(r"[^a-zA-Z0-9]", "", project_name).lower()
