import sys
from pathlib import Path

import matplotlib

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Plots are written to files in tests, never shown
matplotlib.use("Agg")
