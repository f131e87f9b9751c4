"""
Example: Color model conversion and visualization usage.

Demonstrates how to use colormagic for:
- Converting colors between RGB and HSV/CMYK/LAB/YUV
- Adjusting a color in another model
- Transforming pixel buffers with model remaps
- Reusable pipelines and slider templates
- Driving a Workspace and probing pixels
"""

import logging
import sys

import numpy as np

from colormagic import (
    ColorAdjustment,
    ColorModel,
    ModelTransform,
    Param,
    PixelBuffer,
    RGBColor,
    Workspace,
    adjust_color,
    format_color,
    to_model,
    to_rgb,
    transform_image,
)

# Configure logging to see transformation statistics
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def generate_sample_image(width: int = 320, height: int = 240) -> PixelBuffer:
    """Generate a hue sweep with a vertical brightness ramp."""
    x = np.linspace(0.0, 1.0, width)[None, :]
    y = np.linspace(1.0, 0.2, height)[:, None]

    r = np.clip(np.abs(x * 6.0 - 3.0) - 1.0, 0.0, 1.0) * y
    g = np.clip(2.0 - np.abs(x * 6.0 - 2.0), 0.0, 1.0) * y
    b = np.clip(2.0 - np.abs(x * 6.0 - 4.0), 0.0, 1.0) * y

    pixels = np.stack([r, g, b], axis=2) * 255.0
    return PixelBuffer.from_array(np.rint(pixels).astype(np.uint8))


def example_1_conversions():
    """Example 1: Converting a color into every model and back."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Model Conversions")
    print("=" * 70)

    rgb = RGBColor(214, 96, 48)
    for model in ColorModel:
        value = to_model(rgb, model)
        back = to_rgb(value, model)
        print(f"{model.value:>5}: {value!r:<40} -> {back.as_tuple()}")


def example_2_adjust_color():
    """Example 2: Adjusting a single color."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Channel Adjustments")
    print("=" * 70)

    rgb = RGBColor(214, 96, 48)
    for adjustment in (
        ColorAdjustment("HSV", h=120),
        ColorAdjustment("HSV", s=-100),
        ColorAdjustment("CMYK", k=30),
        ColorAdjustment("LAB", b=-60),
        ColorAdjustment("YUV", y=40),
    ):
        result = adjust_color(rgb, adjustment)
        print(f"{adjustment!r:<42} -> {format_color(result, 'RGB')}")


def example_3_transform_image():
    """Example 3: Buffer transformation per model."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Buffer Transformation")
    print("=" * 70)

    image = generate_sample_image()
    print(f"Source: {image!r}")

    for model in ColorModel:
        result = transform_image(image, model)
        mean = result.to_array()[..., :3].reshape(-1, 3).mean(axis=0)
        print(f"{model.value:>5} remap mean RGB: ({mean[0]:.1f}, {mean[1]:.1f}, {mean[2]:.1f})")

    adjusted = transform_image(image, "HSV", ColorAdjustment("HSV", h=180))
    print(f"HSV h=+180 center pixel: {format_color(adjusted.pixel(160, 120), 'HSV')}")


def example_4_pipelines():
    """Example 4: Stacked pipelines and slider templates."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Pipelines and Templates")
    print("=" * 70)

    image = generate_sample_image()

    pipeline = ModelTransform("LAB").adjust(l=10).adjust(a=-20).adjust(l=5)
    print(f"Pipeline: {pipeline!r}")
    pipeline(image)

    template = ModelTransform.template(
        "HSV",
        h=Param("hue", default=0, range=(-180, 180)),
        v=Param("value", default=0, range=(-100, 100)),
    )
    for hue in (-90, 0, 90):
        frame = template(image, params={"hue": hue, "value": 10})
        print(f"hue={hue:+d}: top-left {format_color(frame.pixel(0, 0), 'RGB')}")


def example_5_workspace(path: str | None = None):
    """Example 5: Interactive workspace state."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: Workspace")
    print("=" * 70)

    ws = Workspace()
    if path is not None:
        ws.load(path)
    else:
        ws.set_image(generate_sample_image())
    print(f"Workspace: {ws!r}")

    ws.select_model("CMYK")
    print(f"Original shown, probe (200, 150): {ws.probe(200, 150)}")

    ws.set_channel("k", 25)
    print(f"Adjusted, probe (200, 150):       {ws.probe(200, 150)}")

    # Pointer at (100, 75) on a display twice the surface size
    surface = ws.render()
    display_size = (surface.width * 2, surface.height * 2)
    print(f"Display probe (100, 75) at 2x:     {ws.probe_display(100, 75, display_size)}")
    print(f"Outside the image:                 {ws.probe(1000, 1000)}")


def main():
    """Run all examples."""
    print("\n" + "=" * 70)
    print("COLORMAGIC COLOR MODEL EXAMPLES")
    print("=" * 70)

    example_1_conversions()
    example_2_adjust_color()
    example_3_transform_image()
    example_4_pipelines()
    example_5_workspace(sys.argv[1] if len(sys.argv) > 1 else None)

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
