import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from cascadeim.errors import ConfigError


@dataclass
class RunConfig:
    """
    Parameters of one influence maximization run.

    Attributes:
        cascade_dir: directory holding one edge-list file per cascade
        k: number of seeds to select (> 0)
        suffix: file name suffix of cascade files
        lazy: use CELF lazy evaluation
        processes: worker processes for candidate scoring (None = inline)
        show_progress: tqdm progress bars
        summary: print per-node reach statistics after the run
    """

    cascade_dir: Union[str, Path]
    k: int = 1
    suffix: str = ".txt"
    lazy: bool = False
    processes: Optional[int] = None
    show_progress: bool = False
    summary: bool = False

    def validate(self) -> "RunConfig":
        if isinstance(self.k, bool) or not isinstance(self.k, int) or self.k <= 0:
            raise ConfigError(f"k must be a positive integer, got {self.k!r}")
        if not os.path.isdir(self.cascade_dir):
            raise ConfigError(f"cascade directory does not exist: {self.cascade_dir}")
        if not self.suffix:
            raise ConfigError("suffix must not be empty")
        if self.processes is not None and self.processes < 1:
            raise ConfigError(f"processes must be >= 1, got {self.processes}")
        return self

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        return cls(
            cascade_dir=args.cascade_dir,
            k=args.k,
            suffix=args.suffix,
            lazy=args.lazy,
            processes=args.processes,
            show_progress=args.progress,
            summary=args.summary,
        )
