"""System prompts for AI app generation, one per app type."""

from appforger.models import ProjectType

_OUTPUT_CONTRACT = """
Respond with a single JSON object and nothing else, shaped exactly as:
{{
  "appName": "<display name>",
  "features": ["<short feature name>", ...],
  "files": {{"<relative/path>": "<full file content>", ...}}
}}
Every file must contain complete, non-empty content. Include at least these files:
{required}
"""

MOBILE_SYSTEM_PROMPT = (
    "You are an expert mobile app developer specializing in Expo React Native with "
    "TypeScript and Expo Router.\n"
    "You generate production-ready, professional mobile applications from a short "
    "product description.\n" + _OUTPUT_CONTRACT
)

WEB_SYSTEM_PROMPT = (
    "You are an expert web developer specializing in Next.js (App Router) with "
    "TypeScript and Tailwind CSS.\n"
    "You generate production-ready, professional web applications from a short "
    "product description.\n" + _OUTPUT_CONTRACT
)

REQUIRED_FILES: dict[ProjectType, tuple[str, ...]] = {
    ProjectType.MOBILE: ("package.json", "app.json", "tsconfig.json", "app/_layout.tsx"),
    ProjectType.WEB: ("package.json", "next.config.js", "tsconfig.json", "src/app/layout.tsx"),
}


def system_prompt(app_type: ProjectType) -> str:
    template = MOBILE_SYSTEM_PROMPT if app_type == ProjectType.MOBILE else WEB_SYSTEM_PROMPT
    required = "\n".join(f"- {path}" for path in REQUIRED_FILES[app_type])
    return template.format(required=required)
