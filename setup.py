"""
Unvoid Chess プロジェクトのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="unvoid-chess",
    version="1.0.0",
    description="Unvoid Chess - 可変サイズ盤で遊ぶ2人対戦コンソールボードゲーム",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "unvoid-chess=src.console.cli:main",
        ],
    },
)
