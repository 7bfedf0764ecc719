#!/usr/bin/env python3
# setup.py：安装 gh-repo-manager
#
# 安装方式：
#   pip install -e .
#   pip install -e .[test]   # 附带测试依赖
#
# 启动方式：
#   gh-repo-manager -o OWNER
#   python main.py -o OWNER

from setuptools import setup, find_packages

# 读取 README.md 作为长描述
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "List and clone GitHub repositories of an owner via the GitHub CLI"

setup(
    name="gh-repo-manager",
    version="1.0.0",
    author="qiao-925",
    description="List, export and clone GitHub repositories of an owner via gh and git",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=["main"],
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gh-repo-manager=gh_repo_manager.application:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
