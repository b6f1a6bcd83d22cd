"""
mimic: generate infrastructure configuration files from Python objects.

    import mimic
    from mimic.core.encoding import YAML

    def build(gen: mimic.Generator) -> None:
        gen.with_path("k8s").add("app.yaml", YAML(deployment, service))

    if __name__ == "__main__":
        mimic.run(build)
"""

__version__ = "0.1.0"

from mimic.core.errors import (  # noqa: E402
    ConfigError,
    DirectoryCreationError,
    EncodingError,
    FilenameClashError,
    FileWriteError,
    InvalidFileNameError,
    InvalidPathError,
    MimicError,
)
from mimic.core.generator import GENERATED_COMMENT, Generator  # noqa: E402
from mimic.core.pool import FilePool  # noqa: E402
from mimic.main import new, run  # noqa: E402

__all__ = [
    "ConfigError",
    "DirectoryCreationError",
    "EncodingError",
    "FilePool",
    "FileWriteError",
    "FilenameClashError",
    "GENERATED_COMMENT",
    "Generator",
    "InvalidFileNameError",
    "InvalidPathError",
    "MimicError",
    "__version__",
    "new",
    "run",
]
