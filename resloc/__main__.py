"""
resloc メインエントリポイント

`python -m resloc` として実行することができます
"""

import sys
from resloc.cli import main

if __name__ == "__main__":
    sys.exit(main())
