import os
from typing import Dict, NamedTuple, Optional

import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yml")


class MLParams(NamedTuple):
    epochs: int = 70000
    alpha: float = 0.0005
    batch_size: int = 100
    train_start: float = 0.0
    eval_start: float = 0.5
    seed: Optional[int] = None
    log_every: int = 10000

    @classmethod
    def from_dict(cls, params: Optional[Dict]) -> "MLParams":
        params = dict(params or {})
        unknown = set(params) - set(cls._fields)
        if unknown:
            raise ValueError(f"Unrecognized ml_params: {sorted(unknown)}")

        ml_params = cls(**params)
        for name in ("epochs", "batch_size"):
            value = getattr(ml_params, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer. Received: {value!r}")
        if not isinstance(ml_params.log_every, int) or ml_params.log_every < 0:
            raise ValueError(f"log_every must be a non-negative integer. Received: {ml_params.log_every!r}")
        return ml_params._replace(
            alpha=float(ml_params.alpha),
            train_start=float(ml_params.train_start),
            eval_start=float(ml_params.eval_start),
        )


def load_config(path: Optional[str] = None) -> Dict:
    """
    Read the yaml config. ml_params is swapped for an MLParams so the rest of the
        code doesn't dig through nested dicts.
    """
    with open(path or DEFAULT_CONFIG_PATH, "r") as f:
        config = yaml.safe_load(f) or {}

    config.setdefault("logging_level", "INFO")
    config.setdefault("RUN_IN_DEBUG", False)
    config.setdefault("inference_params", {"temp_in_celsius": 70})
    config["ml_params"] = MLParams.from_dict(config.get("ml_params"))
    return config
