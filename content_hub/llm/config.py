"""LLM configuration."""

from dataclasses import dataclass, field


@dataclass
class LLMConfig:
    """Configuration for chat completion providers."""

    model_name: str
    temperature: float = 0.7
    max_tokens: int | None = 512
    timeout: int = 30
    stop_sequences: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If any parameters are invalid
        """
        if not self.model_name or self.model_name.isspace():
            raise ValueError("model_name is required")
        if not 0 <= self.temperature <= 1:
            raise ValueError("Temperature must be between 0 and 1")
        if self.max_tokens is not None and self.max_tokens <= 0:
            raise ValueError("Max tokens must be positive")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        if any(not s for s in self.stop_sequences):
            raise ValueError("Stop sequences cannot be empty")
