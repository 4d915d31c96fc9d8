import PyInstaller.__main__


def build():
    # Entry point
    entry_point = "run_resizer.py"

    # Exclude unnecessary dependencies
    excludes = [
        "tkinter",
        "numpy",
        "matplotlib",
        "pytest",
    ]

    # PyInstaller arguments
    args = [
        entry_point,
        "--name=Resizer",
        "--onefile",
        "--console",  # Console output is the only interface
        "--clean",
        "--collect-submodules=PIL",
        "--hidden-import=piexif",
    ]

    for exc in excludes:
        args.append(f"--exclude-module={exc}")

    print(f"Starting build with args: {' '.join(args)}")
    PyInstaller.__main__.run(args)


if __name__ == "__main__":
    build()
