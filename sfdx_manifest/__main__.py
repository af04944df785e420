"""Allow running as ``python -m sfdx_manifest``"""

from .cli.main import main

if __name__ == "__main__":
    main()
