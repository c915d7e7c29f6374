import os, sys
import warnings
from pathlib import Path

# Add src/ to sys.path so tests run without an editable install
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Pin registry settings so a developer's .env does not leak into tests
os.environ.setdefault("NICKDB_DELIMITER", "^")
os.environ.setdefault("NICKDB_IDLE_TIMEOUT", "60")
os.environ.setdefault("NICKDB_SWEEP_STRIDE", "2")


def pytest_configure(config):
    # discord.py still imports audioop on some interpreters
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)
