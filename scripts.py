import subprocess
import sys

SOURCES = ["src", "tests"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_doctests():
    subprocess.run(["pytest", "--doctest-modules", "src/dirmeta"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", *SOURCES], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)


def run_format():
    subprocess.run(["black", *SOURCES], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=dirmeta", "--cov-report=term-missing", "--cov-report=xml", "tests/"], check=True)


def run_all():
    for step in (run_lint, run_typecheck, run_tests, run_doctests):
        step()


if __name__ == "__main__":
    globals()[sys.argv[1]]()
