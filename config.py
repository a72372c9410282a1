import logging
import os

PROMPT = os.getenv("MINISHELL_PROMPT", "minishell$ ")
LOG_LEVEL = os.getenv("MINISHELL_LOG_LEVEL", "WARNING").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "WARNING"

# Exit status of a child that failed before replacing its image
EXIT_CHILD_FAILURE = 1
# Exit status of a child whose exec failed (command not found, not executable)
EXIT_EXEC_FAILURE = 127

# Passed to os.open for "cmd > file"; the umask narrows it
REDIRECT_FILE_MODE = 0o666

PIPE_TOKEN = "|"
REDIRECT_TOKEN = ">"
BACKGROUND_TOKEN = "&"
