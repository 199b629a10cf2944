"""Escape-time estimation for the quadratic Julia map."""

from __future__ import annotations

ESCAPE_RADIUS = 2.0


def pixel_to_complex(x: int, y: int, width: int, height: int) -> complex:
    """Scale and translate a pixel into the window re in [-1.5, 1.5], im in [-1, 1]."""

    return complex(
        3.0 * (x - 0.5 * width) / width,
        2.0 * (y - 0.5 * height) / height,
    )


def julia(c: complex, x: int, y: int, width: int, height: int, max_iter: int) -> int:
    """Return the escape iteration count of pixel ``(x, y)`` under ``z*z + c``.

    The count is the index of the last completed step, so a point that
    never escapes reports ``max_iter - 1`` and a point that escapes at
    loop index ``k > 0`` reports ``k - 1``.
    """

    z = pixel_to_complex(x, y, width, height)

    i = 0
    for t in range(max_iter):
        if abs(z) >= ESCAPE_RADIUS:
            break
        z = z * z + c
        i = t
    return i
