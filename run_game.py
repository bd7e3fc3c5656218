#!/usr/bin/env python
"""
Unvoid Chess コンソール版起動スクリプト
"""

import sys
import os

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from src.console.cli import main

if __name__ == "__main__":
    sys.exit(main())
