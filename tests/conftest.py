import os

# Headless Qt for the whole session; pytest-qt creates the QApplication lazily.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
