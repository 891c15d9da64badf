"""Model Selection by Change Size"""

from auto_commit_msg.config import Config, ConfigurationError
from auto_commit_msg.git.stats import DiffStats
from auto_commit_msg.output import print_info


def select_model(stats: DiffStats, config: Config) -> str:
    """Pick the short model for small diffs and the long model otherwise.

    Only insertions and deletions count; a diff exactly at the threshold
    uses the long model.
    """
    total = stats.total_changes
    if total < config.threshold:
        comparison, kind, model = "<", "short", config.short_model
    else:
        comparison, kind, model = ">=", "long", config.long_model

    if not model or not model.strip():
        raise ConfigurationError(f"The {kind} model name is empty. Set {kind}_model in your config.")

    print_info(f"{total} changes {comparison} threshold {config.threshold}, using {kind} model {model}")
    return model
