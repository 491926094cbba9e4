import sys
from pathlib import Path

# Make src/ importable when running the tests from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))
