import setuptools
import os

# READMEファイルがあれば読み込む
long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()

# パッケージ設定
setuptools.setup(
    name="resloc",
    version="0.1.0",
    description="Template resource locator for directories and ZIP/JAR/RAR archives",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "."},
    packages=setuptools.find_packages(where=".", include=["resloc", "resloc.*", "logutils"]),
    python_requires=">=3.8",
    install_requires=[
        "rarfile>=4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "resloc=resloc.cli:main",
        ],
    },
    include_package_data=True,
)
