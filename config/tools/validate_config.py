# config/tools/validate_config.py

import sys           # for exit codes
from pprint import pprint

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_config.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from env.loader import load_pathfinder_settings


def main() -> None:
    """Load and print the resolved pathfinder settings, failing fast on errors."""
    try:
        settings = load_pathfinder_settings()
    except (FileNotFoundError, KeyError, ValueError) as e:
        print("Pathfinder config validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        sys.exit(1)                          # non-zero exit: CI will mark as failed

    print("Pathfinder config validation OK.")
    print("\nActive profile:", settings.name)
    print("\nResolved settings:")
    pprint(vars(settings))


if __name__ == "__main__":
    main()
