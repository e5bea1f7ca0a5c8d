WORK_ITEM_PATTERN = r"bcds-[0-9]+(?:-[a-z0-9]+)*"
MAX_DESCRIPTION_LENGTH = 50

PREFERENCE_DIR_NAME = ".git-guide"
PREFERENCE_FILE_NAME = ".git-commit.json"

LOG_LEVEL_ENV_VAR = "GIT_GUIDE_LOG_LEVEL"

SEPARATOR = "-" * 50
PUSH_HINT = "You can push the change with 'git push'."
