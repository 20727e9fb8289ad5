"""
Lint script runner.
"""
import subprocess
import sys


def main():
    """
    Lint the KLang project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./klang",
        "--exclude=klang/tests",
        "--max-line-length=100",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./klang",
        "--ignore=tests",
        "--max-line-length=100",
    ], check=True)


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        sys.exit(e.returncode)
