"""Development script to run checks (formatting, linting, tests) and a sample render."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally render a menu file."""
    parser = argparse.ArgumentParser(
        description="Run development checks and render a sample menu."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, without fixes"
    )
    parser.add_argument(
        "--render", help="Menu definitions file to render after the checks pass"
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    else:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )

    run_command(["uv", "run", "pytest"], "Tests")

    if args.render:
        run_command(
            ["uv", "run", "python", "-m", "menu.render_menu", args.render],
            "Render Menu",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
