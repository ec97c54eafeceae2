import os
from pathlib import Path
import tempfile

# Must run before src.config is imported so the settings singleton sees it
os.environ.setdefault(
    "LOGGING__LOG_FILE",
    str(Path(tempfile.gettempdir()) / "nextsound-tests.log"),
)
