"""Human-readable summaries of scenes and games."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import Cardinal, Scene

if TYPE_CHECKING:
    from .game import Game

_FACING = {
    Cardinal.SO: "south",
    Cardinal.NO: "north",
    Cardinal.WE: "west",
    Cardinal.EA: "east",
}


def _color_line(label: str, color: tuple[int, int, int] | None) -> str:
    red, green, blue = color if color is not None else (0, 0, 0)
    return f"{label}:\t{red}\t|\t{green}\t|\t{blue}"


def _path(scene: Scene, cardinal: Cardinal) -> str:
    texture = scene.textures.get(cardinal)
    return texture.path if texture is not None else "(null)"


def describe_scene(scene: Scene) -> str:
    """Summarise what was read from a scene file."""
    i, j = scene.player if scene.player is not None else (0, 0)
    lines = [f"player position : {i} || {j}", ""]
    lines += [_path(scene, c) for c in (Cardinal.EA, Cardinal.WE, Cardinal.NO, Cardinal.SO)]
    lines += [
        "",
        _color_line("floor color", scene.floor),
        _color_line("celling color", scene.ceiling),
        "",
    ]
    lines += scene.grid
    lines.append("")
    return "\n".join(lines) + "\n"


def _describe_texture(scene: Scene, cardinal: Cardinal) -> list[str]:
    texture = scene.textures.get(cardinal)
    image = texture.image if texture is not None else None
    lines = ["Img", "---", f"file: {_path(scene, cardinal)}"]
    if image is None:
        lines += ["loaded: no", "BPP: 0", "len: 0", "endian: 0"]
    else:
        lines += [
            f"loaded: {image.width}x{image.height}",
            f"BPP: {image.bpp}",
            f"len: {image.size_line}",
            f"endian: {image.endian}",
        ]
    lines.append("---")
    return lines


def describe_game(game: "Game") -> str:
    """Summarise the state a game was started with."""
    scene = game.scene
    rows, cols = scene.size
    lines = ["Map structure", "---", *scene.grid, "---"]
    lines.append(_color_line("floor color", scene.floor))
    lines.append(_color_line("celling color", scene.ceiling))
    if scene.cardinal is not None and scene.player is not None:
        i, j = scene.player
        lines.append(
            f"Player starts facing {_FACING[scene.cardinal]} at: i: {i} || j: {j}"
        )
    lines.append(f"MHeight: {rows - 1} || MWidth {cols - 1}")
    for cardinal in (Cardinal.EA, Cardinal.WE, Cardinal.SO, Cardinal.NO):
        lines += _describe_texture(scene, cardinal)
    return "\n".join(lines) + "\n"