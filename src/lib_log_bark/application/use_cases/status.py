"""Human-readable diagnostics for the dispatcher state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusSnapshot:
    """Immutable view over the dispatcher state at one point in time."""

    muted: bool
    global_tag: str | None
    auto_tag: bool
    trainer_labels: tuple[str, ...]

    @property
    def tag_mode(self) -> str:
        if self.global_tag is not None:
            return f"[global] {self.global_tag}"
        if self.auto_tag:
            return "auto-detect"
        return "none (auto-detect disabled)"


def render_status(snapshot: StatusSnapshot) -> str:
    """Return the multi-line status banner for ``snapshot``.

    Examples
    --------
    >>> print(render_status(StatusSnapshot(False, None, True, ("ConsoleTrainer",))), end="")
    Bark Status:
      Muzzled: false
      Tag: auto-detect
      Trainers: 1
        [0] ConsoleTrainer
    """

    lines = [
        "Bark Status:",
        f"  Muzzled: {str(snapshot.muted).lower()}",
        f"  Tag: {snapshot.tag_mode}",
        f"  Trainers: {len(snapshot.trainer_labels)}",
    ]
    lines.extend(f"    [{index}] {label}" for index, label in enumerate(snapshot.trainer_labels))
    return "\n".join(lines) + "\n"


__all__ = ["StatusSnapshot", "render_status"]
