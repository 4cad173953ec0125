"""
ドレイクプロジェクトのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="the-drake",
    version="1.0.0",
    description="ドレイク - 4x4 の盤で遊ぶ二人用ボードゲームのルールエンジン",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
