import sys
from pathlib import Path

# put src/ on the import path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from alumni.app.build_site import main

if __name__ == "__main__":
    raise SystemExit(main())
