# RK_edge_detect.py
import logging
import math
from RK_raster import Raster
from RK_spatial_filter import RK_spatial_filter
from RK_tone_mapping import RK_tone_mapping

logger = logging.getLogger(__name__)

SOBEL_X = [-1, 0, 1,
           -2, 0, 2,
           -1, 0, 1]
SOBEL_Y = [-1, -2, -1,
           0, 0, 0,
           1, 2, 1]


class RK_edge_detect:

    def __init__(self):
        self.spatial = RK_spatial_filter()
        self.tone = RK_tone_mapping()

    def sobel(self, image):
        """
        Sobel gradient magnitude of a gray image.

        Both gradients come from raw (unnarrowed) convolutions:
            dx = image * SOBEL_X
            dy = image * SOBEL_Y
        and the magnitude sqrt(dx² + dy²) is truncated to int over the
        interior [1, W-2] x [1, H-2]. That interior is normalized to 0-255 with
        its own min/max; the one pixel rim of the magnitude stays 0.

        A flat image has dx = dy = 0, so min == max and the magnitude comes back
        all zero.

        Returns (dx, dy, magnitude), dx and dy as signed rasters.
        """
        dx, _, _ = self.spatial.convolve_raw(image, SOBEL_X, 3, 3)
        dy, _, _ = self.spatial.convolve_raw(image, SOBEL_Y, 3, 3)

        width, height = image.width(), image.height()
        mag = Raster.signed(width - 2, height - 2)
        low, high = None, None
        for j in range(1, height - 1):
            row_dx = dx.row_read(j)
            row_dy = dy.row_read(j)
            row_mag = mag.row_write(j - 1)
            for i in range(1, width - 1):
                gx, gy = int(row_dx[i]), int(row_dy[i])
                value = int(math.sqrt(gx * gx + gy * gy))
                row_mag[i - 1] = value
                if low is None or value < low:
                    low = value
                if high is None or value > high:
                    high = value

        logger.debug(f"Sobel magnitude range: [{low}, {high}]")
        magnitude = Raster.gray(width, height)
        magnitude.pixels[1:-1, 1:-1] = self.tone.normalize(mag, high, low).pixels
        return dx, dy, magnitude
