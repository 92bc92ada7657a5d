# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def gamma_quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = float(linear_image[y, x, c])
                if value < 0.0:
                    value = 0.0
                # Gamma 2 correction
                value = math.sqrt(value)
                # Clamp before quantization so highlights cannot overflow a byte
                if value > 1.0:
                    value = 1.0
                output_image[y, x, c] = int(255.99 * value)

def gamma_correct(accumulated):
    """
    Convert an image of averaged linear radiance into 8-bit channels.

    Each channel is gamma-corrected with a square root, clamped to [0, 1]
    and quantized as floor(255.99 * c).

    Args:
        accumulated: (height x width x 3) array of per-pixel averages.

    Returns:
        np.ndarray: uint8 array of the same shape.
    """
    linear = np.ascontiguousarray(accumulated, dtype=np.float32)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) image, got shape {linear.shape}")
    output = np.empty(linear.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear, output)
    return output
