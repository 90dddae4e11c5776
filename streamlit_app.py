"""Streamlit Cloud entry point for the surf report dashboard."""
import sys
from pathlib import Path

src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from surfreport.dashboard.app import main

main()
