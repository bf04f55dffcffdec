from .editor import GraphicsEditor
from .scene import (
    SceneConfig,
    build_demo_scene,
    run_demo,
)
