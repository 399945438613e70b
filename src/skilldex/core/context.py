from skilldex.core.registry import SkillRegistry
from skilldex.utils.config import Config


class SharedContext:
    """Shared state handed to the CLI and the HTTP API."""

    config: Config
    registry: SkillRegistry

    def __init__(self, config: Config):
        self.config = config
        self.registry = SkillRegistry.from_config(config)

    def load(self) -> int:
        """Load the registry from the configured skills directory."""
        return self.registry.load(self.config.skills_path)
