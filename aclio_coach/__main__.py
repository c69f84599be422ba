# __main__.py
# Description: Console entry point for aclio_coach.
#
# Imports
from pathlib import Path
#
# Local Imports
from .config import get_cli_setting, get_storage_path, load_cli_config_and_ensure_existence
from .logging_config import configure_logging
#
#######################################################################################################################
#
# Functions:

def main() -> None:
    """Entry point for the aclio-coach command."""
    load_cli_config_and_ensure_existence()
    # The terminal belongs to the UI, so records go to a file only
    log_file = get_cli_setting("logging", "log_file", "") or str(Path(get_storage_path()).parent / "aclio_coach.log")
    configure_logging(log_file=log_file, console=False)

    from .app import AclioApp
    AclioApp().run()


if __name__ == "__main__":
    main()

#
# End of __main__.py
#######################################################################################################################
