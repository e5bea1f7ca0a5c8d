import os
import sys

import click
from dotenv import find_dotenv, load_dotenv

from git_guide.config import LOG_LEVEL_ENV_VAR
from git_guide.core.preferences import PreferenceStore
from git_guide.settings import git_guide_logger, set_git_guide_log_level

from .console import ClickConsole
from .controller import GitGuideController
from .service import GitService

logger = git_guide_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--debug", is_flag=True, help="Enable debug logging")
def run_git_guide(debug: bool) -> None:
    """Build a conventional commit message step by step and commit it.

    \b
    Workflow:
      1. Checks that there are staged changes (git add first).
      2. Asks for the work item, commit type, scope, description,
         optional body, breaking change and issue reference.
      3. Remembers the answers in .git-guide/.git-commit.json as
         defaults for the next run.
      4. Shows the message and commits after confirmation.

    \b
    Environment:
      GIT_GUIDE_LOG_LEVEL may be set (also through a .env file) to
      DEBUG, INFO, WARNING or ERROR.
    """
    load_dotenv(find_dotenv(usecwd=True))

    if debug:
        set_git_guide_log_level("DEBUG")
        logger.debug("Debug logging enabled via --debug flag")
    elif os.getenv(LOG_LEVEL_ENV_VAR):
        set_git_guide_log_level(os.environ[LOG_LEVEL_ENV_VAR])

    controller = GitGuideController(
        git_service=GitService(),
        preference_store=PreferenceStore(),
        console=ClickConsole(),
    )

    sys.exit(controller.run())


if __name__ == "__main__":
    run_git_guide()
