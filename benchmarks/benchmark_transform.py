"""
Benchmark RGBA buffer transformation (fused Numba kernel) per color model.
"""

import time

import numpy as np

from colormagic import ColorAdjustment, ModelTransform, Param, PixelBuffer, transform_image

WIDTH, HEIGHT = 1920, 1080
NUM_ITERATIONS = 50

ADJUSTMENTS = {
    "RGB": ColorAdjustment("RGB", r=20, g=-10),
    "HSV": ColorAdjustment("HSV", h=30, s=-15, v=10),
    "CMYK": ColorAdjustment("CMYK", c=10, k=-5),
    "LAB": ColorAdjustment("LAB", l=8, a=-12, b=20),
    "YUV": ColorAdjustment("YUV", y=15, u=-20),
}

print("=" * 80)
print("RGBA BUFFER TRANSFORM BENCHMARK")
print(f"Testing with {WIDTH}x{HEIGHT} pixels, {NUM_ITERATIONS} iterations")
print("=" * 80)

# Setup
rng = np.random.default_rng(42)
buffer = PixelBuffer.from_array(rng.integers(0, 256, size=(HEIGHT, WIDTH, 4), dtype=np.uint8))
n_pixels = buffer.pixel_count

# Warmup (JIT compilation)
print("\nWarming up...")
for model, adjustment in ADJUSTMENTS.items():
    transform_image(buffer, model, adjustment)

for with_adjustment in (False, True):
    label = "ADJUSTED" if with_adjustment else "REMAP ONLY"
    print("\n" + "=" * 80)
    print(label)
    print("=" * 80)

    for model, adjustment in ADJUSTMENTS.items():
        times = []
        for _ in range(NUM_ITERATIONS):
            start = time.perf_counter()
            transform_image(buffer, model, adjustment if with_adjustment else None)
            times.append((time.perf_counter() - start) * 1000)

        mean_time = np.mean(times)
        std_time = np.std(times)
        throughput = n_pixels / mean_time * 1000 / 1e6
        print(f"{model:>5}: {mean_time:>7.2f} ms +/- {std_time:.2f} ms ({throughput:>6.1f}M px/s)")

# Test different image sizes
print("\n" + "=" * 80)
print("IMAGE SIZE SCALING (HSV, adjusted)")
print("=" * 80)

sizes = [(400, 300), (1280, 720), (1920, 1080), (3840, 2160)]

for width, height in sizes:
    test_buffer = PixelBuffer.from_array(
        rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    )

    # Warmup
    for _ in range(3):
        transform_image(test_buffer, "HSV", ADJUSTMENTS["HSV"])

    times_test = []
    for _ in range(10):
        start = time.perf_counter()
        transform_image(test_buffer, "HSV", ADJUSTMENTS["HSV"])
        times_test.append((time.perf_counter() - start) * 1000)

    test_time = np.mean(times_test)
    throughput = width * height / test_time * 1000 / 1e6

    print(f"{width:>5}x{height:<5}: {test_time:>7.2f} ms ({throughput:>6.1f}M px/s)")

# Template substitution (slider drag)
print("\n" + "=" * 80)
print("SLIDER DRAG (parameterized template, 400x300 workspace)")
print("=" * 80)

workspace_buffer = PixelBuffer.from_array(rng.integers(0, 256, size=(300, 400, 4), dtype=np.uint8))
template = ModelTransform.template("HSV", h=Param("hue", default=0, range=(-180, 180)))

start = time.perf_counter()
for hue in range(-180, 181):
    template(workspace_buffer, params={"hue": hue})
elapsed = (time.perf_counter() - start) * 1000

print(f"361 hue positions: {elapsed:.1f} ms total ({elapsed / 361:.3f} ms per frame)")
print("=" * 80)
