"""
Benchmark per-pixel reference path vs the fused Numba buffer kernel.
"""

import time
from typing import Callable

import numpy as np

from colormagic import ColorAdjustment, ColorModel, PixelBuffer, transform_color, transform_image


def benchmark_function(func: Callable, warmup: int = 3, iterations: int = 10) -> tuple[float, float]:
    """Benchmark a function and return average time in milliseconds."""
    # Warmup
    for _ in range(warmup):
        func()

    # Benchmark
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        end = time.perf_counter()
        times.append((end - start) * 1000)  # Convert to ms

    return np.mean(times), np.std(times)


def reference_transform(buffer: PixelBuffer, model: ColorModel, adjustment: ColorAdjustment) -> list:
    """Pure-Python per-pixel transformation (RGB only, alpha ignored)."""
    return [
        transform_color(buffer.pixel(x, y), model, adjustment)
        for y in range(buffer.height)
        for x in range(buffer.width)
    ]


def benchmark_conversions():
    """Compare the reference converters with the buffer kernel."""
    print("=" * 80)
    print("Reference vs Kernel Benchmark")
    print("=" * 80)

    rng = np.random.default_rng(0)
    sizes = [(64, 48), (160, 120), (400, 300)]

    for model in ColorModel:
        adjustment = ColorAdjustment(model, {model.channels[0]: 10})
        print(f"\n{model.value} ({model.description})")

        for width, height in sizes:
            buffer = PixelBuffer.from_array(
                rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
            )

            ref_mean, ref_std = benchmark_function(
                lambda: reference_transform(buffer, model, adjustment), warmup=1, iterations=3
            )
            kernel_mean, kernel_std = benchmark_function(
                lambda: transform_image(buffer, model, adjustment)
            )

            print(
                f"  {width:>4}x{height:<4} reference: {ref_mean:>9.2f} ms +/- {ref_std:.2f}"
                f" | kernel: {kernel_mean:>7.3f} ms +/- {kernel_std:.3f}"
                f" | speedup: {ref_mean / kernel_mean:>7.1f}x"
            )


if __name__ == "__main__":
    benchmark_conversions()
