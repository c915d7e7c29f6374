import os

from nicknamedb.document import codec


class Registry:
    def __init__(self, config: dict | None = None) -> None:
        registry_cfg = (config or {}).get("nicknamedb", {}).get("registry", {})
        self.DELIMITER: str = str(registry_cfg.get("delimiter", os.getenv("NICKDB_DELIMITER", "^")))
        self.IDLE_TIMEOUT: float = float(registry_cfg.get("idle_timeout", os.getenv("NICKDB_IDLE_TIMEOUT", "60")))
        self.SWEEP_STRIDE: int = int(registry_cfg.get("sweep_stride", os.getenv("NICKDB_SWEEP_STRIDE", "2")))

        invalid = []
        try:
            codec.validate_delimiter(self.DELIMITER)
        except ValueError:
            invalid.append(("NICKDB_DELIMITER", self.DELIMITER))
        if self.IDLE_TIMEOUT < 0:
            invalid.append(("NICKDB_IDLE_TIMEOUT", self.IDLE_TIMEOUT))
        if self.SWEEP_STRIDE < 1:
            invalid.append(("NICKDB_SWEEP_STRIDE", self.SWEEP_STRIDE))
        if invalid:
            detail = ", ".join(f"{name}={val!r}" for name, val in invalid)
            raise ValueError(f"Invalid registry settings: {detail}")
