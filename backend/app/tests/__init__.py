"""Test package; puts the app directory on the path so 'src' and 'configs' import."""

import sys
from pathlib import Path

app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))
