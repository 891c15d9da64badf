"""CLI Commands"""

import os
import sys

from auto_commit_msg import TOOL_NAME
from auto_commit_msg.config import Config, ConfigManager, ENV_PREFIX
from auto_commit_msg.output import bold, dim, info, success, warning


def display_config(config: Config, manager: ConfigManager) -> int:
    """Display the effective configuration."""
    config_path = manager.get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {ConfigManager.CONFIG_FILENAME} found)")

    overrides = sorted(k for k in manager.environ if k.startswith(ENV_PREFIX))
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name in overrides:
            print(f"    {name}={manager.environ[name]}")

    key_status = success("set") if config.resolve_secret(manager.environ) else warning("not set")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    trace:       {info(str(config.trace).lower())}")
    print(f"    base_url:    {info(config.base_url)}")
    print(f"    api_key:     {info(config.api_key)} ({key_status})")
    print(f"    short_model: {info(config.short_model)}")
    print(f"    long_model:  {info(config.long_model)}")
    print(f"    threshold:   {info(str(config.threshold))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {ConfigManager.CONFIG_FILENAME} (in current directory)")
    print(f"    Global: ~/{ConfigManager.CONFIG_FILENAME}\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = f'eval "$(register-python-argcomplete {TOOL_NAME})"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print(f"  register-python-argcomplete --shell powershell {TOOL_NAME} | Out-String | Invoke-Expression\n")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print(f"  register-python-argcomplete --shell fish {TOOL_NAME} | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
