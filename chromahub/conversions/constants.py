"""
Numeric constants shared by all conversion formulas.

Everything here is a literal (or derived from literals) and is never mutated.
"""
import numpy as np

# JFIF / BT.601 luma weights
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

# JFIF RGB -> YCbCr chroma rows (full range)
CB_R = -0.1687
CB_G = -0.3313
CB_B = 0.5
CR_R = 0.5
CR_G = -0.4187
CR_B = -0.0813
CHROMA_OFFSET_INT = 128.0
CHROMA_OFFSET_FLOAT = 0.5

# JFIF YCbCr -> RGB
CR_TO_R = 1.402
CB_TO_G = 0.344136
CR_TO_G = 0.714136
CB_TO_B = 1.772

# sRGB companding
SRGB_DECODE_BYTE_THRESHOLD = 10
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_A = 0.055
SRGB_D = 1.055
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4

# sRGB (D65) linear RGB -> XYZ, http://www.brucelindbloom.com/index.html?Calc.html
RGB_TO_XYZ = np.array([
    [0.4124564390896921, 0.357576077643909, 0.18043748326639894],
    [0.21267285140562248, 0.715152155287818, 0.07217499330655958],
    [0.019333895582329317, 0.119192025881303, 0.9503040785363677],
])

XYZ_TO_RGB = np.array([
    [3.2404541621141054, -1.5371385127977166, -0.4985314095560162],
    [-0.9692660305051868, 1.8760108454466942, 0.04155601753034984],
    [0.05564343095911469, -0.20402591351675387, 1.0572251882231791],
])

# CIE kappa and epsilon, see http://www.brucelindbloom.com/LContinuity.html
KAPPA = 24389.0 / 27.0
EPSILON = 216.0 / 24389.0
CBRT_EPSILON = 0.20689655172413796
KAPPA_EPSILON = KAPPA * EPSILON

# D65 reference white
WHITE_X = 0.95047
WHITE_Y = 1.0
WHITE_Z = 1.08883
WHITE_POINT = (WHITE_X, WHITE_Y, WHITE_Z)

LAB_L_MAX = 100.0
