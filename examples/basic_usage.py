"""Basic Chromagrad usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import math

from chromagrad import (
    Alignment,
    GradientRotation,
    HslColor,
    RgbColor,
    Rect,
    TileMode,
    convert,
    linear_gradient,
    paint,
    sweep_gradient,
    to_image,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert between spaces.
    accent = RgbColor((255, 128, 64))
    print("RGB as hex:", accent.to_hex())
    print("RGB -> HSL:", accent.convert("hsl"))
    print("RGB -> Oklab (tuple):", convert(accent.value, "rgb", "oklab"))


def demonstrate_gradients() -> None:
    # Per-segment spaces: the first segment runs in HSL, the second in RGB.
    spec = linear_gradient(
        [HslColor((0, 100, 50)), RgbColor((0, 0, 255)), "#ffcc00"],
        stops=[0.0, 0.6, 1.0],
    )
    args = spec.create_shader(Rect.from_size(640, 48), device_pixel_ratio=2.0)
    print(f"linear: {args.sample_count} samples, resampled={args.resampled}")

    # A narrow strip keeps the original colors.
    small = spec.create_shader(Rect.from_size(16, 16))
    print(f"small linear: {small.sample_count} samples, resampled={small.resampled}")

    # Every segment in Oklab, mirrored and rotated.
    ring = sweep_gradient(
        ["#ff0044", "#00ccff", "#ff0044"],
        color_space="oklab",
        tile_mode=TileMode.MIRROR,
        transform=GradientRotation(math.pi / 4),
    )
    to_image(paint(ring, 256, 256)).save("sweep.png")

    banner = linear_gradient(
        ["#222244", "#ee8833"],
        begin=Alignment.top_left,
        end=Alignment.bottom_right,
        color_space="lab",
    )
    to_image(paint(banner, 320, 80), background=(255, 255, 255)).save("banner.png")
    print("wrote sweep.png and banner.png")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
