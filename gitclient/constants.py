"""gitclient constants."""

from pathlib import Path

# Environment variables git understands and that callers may override.
GIT_ENVIRONMENT_VARIABLES: frozenset[str] = frozenset(
    {
        "GIT_INDEX_FILE",
        "GIT_OBJECT_DIRECTORY",
        "GIT_ALTERNATE_OBJECT_DIRECTORIES",
        "GIT_DIR",
        "GIT_WORK_TREE",
        "GIT_CEILING_DIRECTORIES",
        "GIT_DISCOVERY_ACROSS_FILESYSTEM",
        "GIT_AUTHOR_NAME",
        "GIT_AUTHOR_EMAIL",
        "GIT_AUTHOR_DATE",
        "GIT_COMMITTER_NAME",
        "GIT_COMMITTER_EMAIL",
        "GIT_COMMITTER_DATE",
        "EMAIL",
        "GIT_DIFF_OPTS",
        "GIT_EXTERNAL_DIFF",
        "GIT_MERGE_VERBOSITY",
        "GIT_PAGER",
        "GIT_SSH",
        "GIT_ASKPASS",
        "GIT_FLUSH",
        "GIT_TRACE",
    }
)

# Variables used to feed an SSH key password through SSH_ASKPASS.
SHELL_ENVIRONMENT_VARIABLES: frozenset[str] = frozenset({"SSH_ASKPASS", "DISPLAY", "SSH_PASS"})

NO_DESCRIPTION = (
    "There is no repository description file. Please, create one to remove this message."
)

DEFAULT_GIT_BINARY = "git"
DEFAULT_CONFIG_PATH = Path(".gitclient/config.yaml")
DEFAULT_LOG_DIR = ".gitclient/logs"

# ssh(1) only consults SSH_ASKPASS when DISPLAY is set.
SSH_ASKPASS_DISPLAY = "hack"
SSH_ASKPASS_SCRIPT = Path(__file__).parent / "scripts" / "ssh-echopass"
