"""CLI Main Entry Point"""

import sys
from dataclasses import replace
from pathlib import Path

from auto_commit_msg.config import ConfigManager, ConfigurationError
from auto_commit_msg.git import GitError
from auto_commit_msg.llm import LLMError
from auto_commit_msg.output import print_error
from auto_commit_msg.workflow import CommitMessageWorkflow

from auto_commit_msg.cli.args import parse_args
from auto_commit_msg.cli.commands import display_config, run_install_completion


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    manager = ConfigManager()
    try:
        config = manager.load(Path(args.config) if args.config else None)
    except ConfigurationError as e:
        print_error(str(e))
        return 1

    # CLI flags take precedence over file and environment
    if args.trace:
        config = replace(config, trace=True)

    if args.display_config:
        return display_config(config, manager)

    destination = Path(args.commit_msg_file) if args.commit_msg_file else None
    workflow = CommitMessageWorkflow(config)

    try:
        workflow.run(destination, commit_source=args.commit_source)
    except (ConfigurationError, GitError, LLMError) as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Could not write commit message: {e}")
        return 1
    except KeyboardInterrupt:
        print_error("Cancelled.")
        return 130

    return 0


def run() -> None:
    sys.exit(main())
