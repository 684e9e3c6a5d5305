import sys
from pathlib import Path

# Make the flat-layout ``swapengine`` package importable when pytest is run
# from a checkout without installing it.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
