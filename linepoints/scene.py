"""Scene documents: which vector objects to draw, and how.

A scene file is loaded through `SceneFileEngine` (by extension), validated
into a `SceneConfig`, and turned into vector objects through `ShapeEngine`
(by shape kind).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml as yaml_lib
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .engines import SceneFileEngine, ShapeEngine
from .utils import SceneConfigError
from .vector import VectorObject

logger = logging.getLogger(__name__)

__all__ = ["ShapeSpec", "SceneConfig", "load_scene", "build_objects", "default_scene"]


class ShapeSpec(BaseModel):
    """One shape of a scene: a kind plus the builder's keyword arguments."""

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: str

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class SceneConfig(BaseModel):
    """Validated scene document."""

    model_config = ConfigDict(extra="forbid")

    passes: int = Field(default=2, ge=1)
    strict: bool = False
    objects: List[ShapeSpec] = Field(default_factory=list)


def default_scene() -> SceneConfig:
    """The two nested rectangles drawn twice."""
    return SceneConfig(
        passes=2,
        objects=[
            ShapeSpec(kind="rectangle", x=1, y=1, width=10, height=10),
            ShapeSpec(kind="rectangle", x=3, y=3, width=6, height=6),
        ],
    )


def load_scene(filepath: Union[str, Path]) -> SceneConfig:
    """Load and validate a scene file.

    Raises:
        SceneConfigError: for unsupported extensions, unreadable or malformed
            files and invalid documents.
    """
    filepath = Path(filepath)
    ext = filepath.suffix.lstrip(".").lower()
    if not ext:
        raise SceneConfigError(
            f"Cannot determine file type for: {filepath}",
            [f"Use one of: {', '.join(f'.{e}' for e in SceneFileEngine.keys())}"],
            {"path": str(filepath)},
        )

    loader = SceneFileEngine.get_artifact(ext)
    try:
        document = loader(filepath)
    except (OSError, ValueError, yaml_lib.YAMLError) as e:
        # decode errors of json, toml and utf-8 are all ValueErrors
        raise SceneConfigError(
            f"Cannot read scene file {filepath}: {e}",
            [
                "Check that the file exists and is readable",
                f"Check that the file is valid {ext.upper()}",
            ],
            {"path": str(filepath), "error_type": type(e).__name__},
        ) from e
    if not isinstance(document, dict):
        raise SceneConfigError(
            f"Scene file {filepath} does not contain a mapping",
            ["Put 'objects', 'passes' and 'strict' at the top level"],
            {"path": str(filepath), "actual_type": type(document).__name__},
        )

    try:
        scene = SceneConfig.model_validate(document)
    except PydanticValidationError as e:
        raise SceneConfigError(
            f"Invalid scene file {filepath}",
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
            {"path": str(filepath)},
        ) from e

    logger.info("Loaded scene %s with %d object(s)", filepath, len(scene.objects))
    return scene


def build_objects(scene: SceneConfig) -> List[VectorObject]:
    """Build the vector objects of `scene`.

    Raises:
        SceneConfigError: for unknown shape kinds and invalid shape parameters.
    """
    objects = []
    for index, spec in enumerate(scene.objects):
        builder = ShapeEngine.get_artifact(spec.kind)
        try:
            objects.append(builder(**spec.params))
        except PydanticValidationError as e:
            raise SceneConfigError(
                f"Invalid parameters for {spec.kind} at objects[{index}]",
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
                {"kind": spec.kind, "index": index},
            ) from e
    return objects
