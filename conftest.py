"""
Pytest configuration file for the translation service tests.
"""

import sys
from pathlib import Path

# Modules live at the project root
sys.path.insert(0, str(Path(__file__).parent))
