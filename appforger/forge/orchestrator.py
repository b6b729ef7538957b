"""Forge pipeline: description -> files -> repository -> commit -> deployment.

A run moves a project from forging to ready or error, appending a ForgeLog line
at every step. Nothing escapes run(): failures end up in the project's status
and error message, which is all the (already answered) caller can observe.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from langchain_core.runnables import Runnable

from appforger.clients.github import GitHubClient
from appforger.clients.vercel import VercelClient
from appforger.config import Settings
from appforger.generator import (
    generate_app,
    generate_scaffold,
    is_substantive_description,
)
from appforger.logging_config import bind_project_context, get_logger
from appforger.models import ForgeProject, LogLevel, ProjectStatus, ProjectType
from appforger.schemas.generation import AppGenerationRequest, FileSet
from appforger.schemas.vercel import DeploymentRequest

from .store import ForgeStore

logger = get_logger(__name__)

APP_TYPE_LABELS = {
    ProjectType.MOBILE: "Expo React Native",
    ProjectType.WEB: "Next.js",
}

COMMIT_MESSAGES = {
    ProjectType.MOBILE: "Initial commit: AppForger generated Expo React Native app",
    ProjectType.WEB: "Initial commit: AppForger generated Next.js web app",
}

VERCEL_NEW_PROJECT_URL = "https://vercel.com/new"


class ProjectNotFoundError(Exception):
    pass


@dataclass
class ForgeResult:
    success: bool
    repo_url: str | None = None
    preview_url: str | None = None
    error: str | None = None


class ForgeOrchestrator:
    """Runs the forge pipeline for one project at a time.

    Instances hold no per-run state, so one orchestrator can serve any number
    of concurrent runs for different projects.
    """

    def __init__(
        self,
        store: ForgeStore,
        github: GitHubClient,
        vercel: VercelClient,
        settings: Settings,
        llm_factory: Callable[[], Runnable] | None = None,
    ):
        self.store = store
        self.github = github
        self.vercel = vercel
        self.settings = settings
        self.llm_factory = llm_factory

    @property
    def ai_configured(self) -> bool:
        return self.llm_factory is not None and self.settings.openai_configured

    def repo_name(self, project_id: str) -> str:
        return f"{self.settings.repo_name_prefix}-{project_id[:8]}"

    async def run(self, project_id: str, owner_id: str) -> ForgeResult:
        bind_project_context(project_id, owner_id)
        logger.info("forge_started")

        try:
            return await self._run(project_id, owner_id)
        except ProjectNotFoundError as e:
            # Nothing owned by this caller to record the failure on
            logger.warning("forge_project_not_found", error=str(e))
            return ForgeResult(success=False, error=str(e))
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.exception("forge_failed", error=message, error_type=type(e).__name__)
            await self._record_failure(project_id, owner_id, message)
            return ForgeResult(success=False, error=message)

    async def _record_failure(self, project_id: str, owner_id: str, message: str) -> None:
        try:
            await self.store.add_log(project_id, f"Forge failed: {message}", LogLevel.ERROR)
            await self.store.update_status(
                project_id, owner_id, ProjectStatus.ERROR, error_message=message
            )
        except Exception:
            logger.exception("forge_failure_not_persisted", error=message)

    async def _run(self, project_id: str, owner_id: str) -> ForgeResult:
        log = self.store.add_log

        # 1. Ownership
        project = await self.store.get_project(project_id, owner_id)
        if project is None:
            raise ProjectNotFoundError("Project not found or access denied")
        await log(project_id, "Starting forge process...")

        # 2. Status
        await self.store.update_status(project_id, owner_id, ProjectStatus.FORGING)
        await log(project_id, "Project ownership verified")

        project_type = ProjectType(project.project_type or ProjectType.MOBILE.value)

        # 3-4. Generation
        files = await self._generate(project, project_type)

        # 5. Persistence
        await log(project_id, "Saving generated files to database...")
        try:
            saved = await self.store.save_files(project_id, files)
        except Exception as e:
            raise RuntimeError(f"Failed to save generated files: {e}") from e
        await log(project_id, f"Saved {saved} files to database")

        # 6. Repository
        owner = self.github.get_owner()
        repo_name = self.repo_name(project_id)
        if project.repo_url:
            # Re-forge: commit on top of the repository from the previous run
            repo = await self.github.get_repository(owner, repo_name)
            await log(project_id, f"Reusing GitHub repository: {repo.html_url}")
        else:
            await log(project_id, "Creating GitHub repository...")
            repo = await self.github.create_repository(
                name=repo_name,
                description=f"AppForger generated app: {project.name}",
                private=False,
            )
            await log(project_id, f"GitHub repository created: {repo.html_url}")
            # Recorded now so a retry after a failed commit reuses the repository
            await self.store.update_status(
                project_id, owner_id, ProjectStatus.FORGING, repo_url=repo.html_url
            )

        # 7. Commit
        await log(project_id, "Committing files to repository...")
        if self.settings.commit_settle_seconds:
            await asyncio.sleep(self.settings.commit_settle_seconds)
        commit_sha = await self.github.commit_files(
            owner, repo_name, files, COMMIT_MESSAGES[project_type]
        )
        logger.info("forge_files_committed", repo=repo_name, commit_sha=commit_sha)
        await log(project_id, "All files committed to GitHub")

        # 8. Deployment
        preview_url = None
        if project_type == ProjectType.WEB:
            preview_url = await self._deploy(project, repo.html_url)

        # 9. Done. Final log lines go first so nothing is written after ready.
        await log(project_id, "Forge complete! Repository is ready.")
        if project_type == ProjectType.WEB and not preview_url:
            await log(
                project_id, f"To deploy: Connect your repo to Vercel at {VERCEL_NEW_PROJECT_URL}"
            )
        if project_type == ProjectType.MOBILE:
            await log(project_id, "Mobile preview: Scan QR code to open in Expo Snack")

        await self.store.update_status(
            project_id,
            owner_id,
            ProjectStatus.READY,
            repo_url=repo.html_url,
            preview_url=preview_url,
            error_message=None,
        )
        logger.info("forge_completed", repo_url=repo.html_url, preview_url=preview_url)
        return ForgeResult(success=True, repo_url=repo.html_url, preview_url=preview_url)

    async def _generate(self, project: ForgeProject, project_type: ProjectType) -> FileSet:
        """Produce the file set, falling back to the scaffold on any AI failure."""
        log = self.store.add_log
        project_id = project.id
        substantive = is_substantive_description(project.description)

        if self.ai_configured and substantive:
            await log(
                project_id,
                "Using AI to generate professional app based on your description...",
            )
            await log(project_id, f"App type: {APP_TYPE_LABELS[project_type]}")
            try:
                result = await generate_app(
                    AppGenerationRequest(
                        project_name=project.name,
                        description=project.description,
                        app_type=project_type,
                    ),
                    self.llm_factory(),
                )
            except Exception as e:
                logger.warning("ai_generation_failed", error=str(e), error_type=type(e).__name__)
                await log(project_id, f"AI generation failed: {e}", LogLevel.WARN)
                await log(project_id, "Falling back to template scaffold...")
                return generate_scaffold(project_type, project_id, project.name)

            await log(project_id, f"AI generated {len(result.files)} files")
            if result.features:
                await log(project_id, f"Features included: {', '.join(result.features)}")
            return result.files

        if not substantive:
            await log(project_id, "No detailed description provided - using template scaffold")
        else:
            await log(project_id, "OpenAI not configured - using template scaffold")

        label = "mobile" if project_type == ProjectType.MOBILE else "web"
        await log(project_id, f"Generating {label} scaffold ({APP_TYPE_LABELS[project_type]})...")
        return generate_scaffold(project_type, project_id, project.name)

    async def _deploy(self, project: ForgeProject, repo_url: str) -> str | None:
        """Trigger a Vercel deployment. Never fails the run."""
        log = self.store.add_log
        project_id = project.id

        if not self.vercel.is_configured():
            await log(project_id, "Vercel not configured - skipping auto-deploy")
            await log(project_id, "To enable auto-deploy: Set VERCEL_TOKEN in your environment")
            return None

        await log(project_id, "Triggering Vercel deployment for web app...")
        try:
            deployment = await self.vercel.deploy(
                DeploymentRequest(
                    repo_url=repo_url,
                    project_name=f"{project.name}-web",
                    framework="nextjs",
                )
            )
        except Exception as e:
            logger.warning("vercel_deploy_raised", error=str(e))
            await log(project_id, f"Vercel deployment warning: {e}", LogLevel.WARN)
            await log(
                project_id,
                f"You can manually connect your repo to Vercel at {VERCEL_NEW_PROJECT_URL}",
            )
            return None

        if deployment is None:
            await log(
                project_id,
                "Vercel deployment could not be started - no preview URL available",
                LogLevel.WARN,
            )
            return None

        await log(project_id, f"Vercel deployment started: {deployment.preview_url}")
        await log(project_id, f"Deployment status: {deployment.status.value}")
        return deployment.preview_url


async def run_forge_process(
    orchestrator: ForgeOrchestrator, project_id: str, owner_id: str
) -> ForgeResult:
    return await orchestrator.run(project_id, owner_id)


_background_tasks: set[asyncio.Task] = set()


def schedule_forge(
    orchestrator: ForgeOrchestrator, project_id: str, owner_id: str
) -> asyncio.Task:
    """Start a forge run in the background without awaiting it.

    The task is referenced until done so it cannot be garbage collected mid-run.
    """
    task = asyncio.create_task(
        run_forge_process(orchestrator, project_id, owner_id),
        name=f"forge-{project_id}",
    )
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task
