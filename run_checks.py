import subprocess
import sys

def run_command(command, output_file):
    print(f"Running: {' '.join(command)}")
    try:
        with open(output_file, "w") as f:
            result = subprocess.run(
                command,
                stdout=f,
                stderr=subprocess.STDOUT,
                text=True
            )
        print(f"Finished: {' '.join(command)} (Exit Code: {result.returncode})")
        return result.returncode
    except OSError as e:
        print(f"Error running {' '.join(command)}: {e}")
        return 1

def main():
    print("Starting code quality checks...")

    # 'uv run' picks up the dev extra declared in pyproject.toml
    commands = [
        (["uv", "run", "--extra", "dev", "ruff", "check", "src", "tests"], "ruff_output.txt"),
        (["uv", "run", "--extra", "dev", "mypy", "src/kthancestor"], "mypy_output.txt"),
        (["uv", "run", "--extra", "dev", "pytest", "-q"], "test_output.txt"),
    ]

    failed = [cmd[4] for cmd, output_file in commands if run_command(cmd, output_file) != 0]

    print("\nChecks completed.")
    if failed:
        print(f"Failed: {', '.join(failed)}. See the *_output.txt files.")
        sys.exit(1)
    print("All checks passed!")
    sys.exit(0)

if __name__ == "__main__":
    main()
