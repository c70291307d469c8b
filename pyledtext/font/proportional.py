"""Proportional 8x8 font for LED matrix text.

Each entry maps a code point to ``(width, height, x_offset, y_offset,
x_advance, columns)``. Columns are vertical bit patterns, bit 0 at the top.
The table is built once at import time and shared by every renderer.
"""

from __future__ import annotations

from typing import Mapping

from .glyph import Glyph, GlyphTable

GlyphRow = tuple[int, int, int, int, int, tuple[int, ...]]

PROPORTIONAL_GLYPHS: Mapping[int, GlyphRow] = {
    # Basic Latin
    0x0020: (3, 1, -1, 7, 4, (0x00, 0x00, 0x00)),  # space
    0x0021: (1, 7, 2, 0, 5, (0x5F,)),  # !
    0x0022: (3, 3, 2, 0, 7, (0x07, 0x00, 0x07)),  # "
    0x0023: (6, 6, 1, 1, 8, (0x12, 0x3F, 0x12, 0x12, 0x3F, 0x12)),  # #
    0x0024: (5, 7, 1, 0, 7, (0x24, 0x2A, 0x7F, 0x2A, 0x10)),  # $
    0x0025: (7, 7, 1, 0, 9, (0x06, 0x29, 0x16, 0x08, 0x34, 0x4A, 0x30)),  # %
    0x0026: (5, 7, 1, 0, 7, (0x36, 0x49, 0x49, 0x49, 0x72)),  # &
    0x0027: (1, 3, 2, 0, 5, (0x07,)),  # '
    0x0028: (3, 7, 3, 0, 7, (0x1C, 0x22, 0x41)),  # (
    0x0029: (3, 7, 1, 0, 7, (0x41, 0x22, 0x1C)),  # )
    0x002A: (5, 5, 1, 0, 7, (0x0A, 0x04, 0x1F, 0x04, 0x0A)),  # *
    0x002B: (5, 5, 1, 1, 7, (0x04, 0x04, 0x1F, 0x04, 0x04)),  # +
    0x002C: (2, 3, 1, 5, 5, (0x04, 0x03)),  # ,
    0x002D: (4, 1, 1, 3, 6, (0x01, 0x01, 0x01, 0x01)),  # -
    0x002E: (1, 1, 2, 6, 5, (0x01,)),  # .
    0x002F: (3, 7, 1, 0, 5, (0x60, 0x1C, 0x03)),  # /
    0x0030: (5, 7, 1, 0, 7, (0x3E, 0x51, 0x49, 0x45, 0x3E)),  # 0
    0x0031: (3, 7, 2, 0, 7, (0x04, 0x02, 0x7F)),  # 1
    0x0032: (5, 7, 1, 0, 7, (0x42, 0x61, 0x51, 0x49, 0x46)),  # 2
    0x0033: (5, 7, 1, 0, 7, (0x22, 0x41, 0x49, 0x49, 0x36)),  # 3
    0x0034: (5, 7, 1, 0, 7, (0x18, 0x14, 0x12, 0x11, 0x7F)),  # 4
    0x0035: (5, 7, 1, 0, 7, (0x27, 0x45, 0x45, 0x45, 0x39)),  # 5
    0x0036: (5, 7, 1, 0, 7, (0x3E, 0x49, 0x49, 0x49, 0x32)),  # 6
    0x0037: (5, 7, 1, 0, 7, (0x61, 0x11, 0x09, 0x05, 0x03)),  # 7
    0x0038: (5, 7, 1, 0, 7, (0x36, 0x49, 0x49, 0x49, 0x36)),  # 8
    0x0039: (5, 7, 1, 0, 7, (0x26, 0x49, 0x49, 0x49, 0x3E)),  # 9
    0x003A: (1, 5, 2, 2, 5, (0x11,)),  # :
    0x003B: (2, 6, 1, 2, 5, (0x20, 0x19)),  # ;
    0x003C: (3, 5, 1, 1, 5, (0x04, 0x0A, 0x11)),  # <
    0x003D: (4, 3, 1, 2, 6, (0x05, 0x05, 0x05, 0x05)),  # =
    0x003E: (3, 5, 1, 1, 5, (0x11, 0x0A, 0x04)),  # >
    0x003F: (5, 7, 1, 0, 7, (0x02, 0x01, 0x51, 0x09, 0x06)),  # ?
    0x0040: (7, 8, 1, 0, 9, (0x7E, 0x81, 0x99, 0xA5, 0xBD, 0xA1, 0x1E)),  # @
    0x0041: (5, 7, 1, 0, 7, (0x7E, 0x11, 0x11, 0x11, 0x7E)),  # A
    0x0042: (5, 7, 1, 0, 7, (0x7F, 0x49, 0x49, 0x49, 0x36)),  # B
    0x0043: (5, 7, 1, 0, 7, (0x3E, 0x41, 0x41, 0x41, 0x22)),  # C
    0x0044: (5, 7, 1, 0, 7, (0x7F, 0x41, 0x41, 0x41, 0x3E)),  # D
    0x0045: (5, 7, 1, 0, 7, (0x7F, 0x49, 0x49, 0x41, 0x41)),  # E
    0x0046: (5, 7, 1, 0, 7, (0x7F, 0x09, 0x09, 0x01, 0x01)),  # F
    0x0047: (5, 7, 1, 0, 7, (0x3E, 0x41, 0x41, 0x49, 0x7A)),  # G
    0x0048: (5, 7, 1, 0, 7, (0x7F, 0x08, 0x08, 0x08, 0x7F)),  # H
    0x0049: (1, 7, 2, 0, 5, (0x7F,)),  # I
    0x004A: (5, 7, 1, 0, 7, (0x20, 0x40, 0x40, 0x40, 0x3F)),  # J
    0x004B: (5, 7, 1, 0, 7, (0x7F, 0x08, 0x14, 0x22, 0x41)),  # K
    0x004C: (5, 7, 1, 0, 7, (0x7F, 0x40, 0x40, 0x40, 0x40)),  # L
    0x004D: (7, 7, 1, 0, 9, (0x7F, 0x04, 0x08, 0x10, 0x08, 0x04, 0x7F)),  # M
    0x004E: (5, 7, 1, 0, 7, (0x7F, 0x04, 0x08, 0x10, 0x7F)),  # N
    0x004F: (5, 7, 1, 0, 7, (0x3E, 0x41, 0x41, 0x41, 0x3E)),  # O
    0x0050: (5, 7, 1, 0, 7, (0x7F, 0x11, 0x11, 0x11, 0x0E)),  # P
    0x0051: (5, 7, 1, 0, 7, (0x3E, 0x41, 0x51, 0x21, 0x5E)),  # Q
    0x0052: (5, 7, 1, 0, 7, (0x7F, 0x11, 0x11, 0x31, 0x4E)),  # R
    0x0053: (5, 7, 1, 0, 7, (0x26, 0x49, 0x49, 0x49, 0x32)),  # S
    0x0054: (5, 7, 1, 0, 7, (0x01, 0x01, 0x7F, 0x01, 0x01)),  # T
    0x0055: (5, 7, 1, 0, 7, (0x3F, 0x40, 0x40, 0x40, 0x3F)),  # U
    0x0056: (5, 7, 1, 0, 7, (0x1F, 0x20, 0x40, 0x20, 0x1F)),  # V
    0x0057: (7, 7, 1, 0, 9, (0x3F, 0x40, 0x40, 0x3C, 0x40, 0x40, 0x3F)),  # W
    0x0058: (5, 7, 1, 0, 7, (0x63, 0x14, 0x08, 0x14, 0x63)),  # X
    0x0059: (5, 7, 1, 0, 7, (0x03, 0x04, 0x78, 0x04, 0x03)),  # Y
    0x005A: (5, 7, 1, 0, 7, (0x61, 0x51, 0x49, 0x45, 0x43)),  # Z
    0x005B: (3, 7, 3, 0, 7, (0x7F, 0x41, 0x41)),  # [
    0x005C: (3, 7, 1, 0, 5, (0x03, 0x1C, 0x60)),  # backslash
    0x005D: (3, 7, 1, 0, 7, (0x41, 0x41, 0x7F)),  # ]
    0x005E: (5, 3, 1, 0, 7, (0x04, 0x02, 0x01, 0x02, 0x04)),  # ^
    0x005F: (5, 1, 0, 7, 5, (0x01, 0x01, 0x01, 0x01, 0x01)),  # _
    0x0060: (2, 2, 1, 0, 5, (0x01, 0x02)),  # `
    0x0061: (5, 5, 1, 2, 7, (0x08, 0x15, 0x15, 0x15, 0x1E)),  # a
    0x0062: (5, 7, 1, 0, 7, (0x7F, 0x44, 0x44, 0x44, 0x38)),  # b
    0x0063: (5, 5, 1, 2, 7, (0x0E, 0x11, 0x11, 0x11, 0x0A)),  # c
    0x0064: (5, 7, 1, 0, 7, (0x38, 0x44, 0x44, 0x44, 0x7F)),  # d
    0x0065: (5, 5, 1, 2, 7, (0x0E, 0x15, 0x15, 0x15, 0x06)),  # e
    0x0066: (4, 7, 1, 0, 6, (0x04, 0x7E, 0x05, 0x05)),  # f
    0x0067: (5, 6, 1, 2, 7, (0x06, 0x29, 0x29, 0x29, 0x1F)),  # g
    0x0068: (5, 7, 1, 0, 7, (0x7F, 0x04, 0x04, 0x04, 0x78)),  # h
    0x0069: (1, 7, 2, 0, 5, (0x7D,)),  # i
    0x006A: (5, 8, 1, 0, 7, (0x40, 0x80, 0x80, 0x80, 0x7D)),  # j
    0x006B: (5, 7, 1, 0, 7, (0x7F, 0x10, 0x18, 0x24, 0x40)),  # k
    0x006C: (2, 7, 2, 0, 5, (0x3F, 0x40)),  # l
    0x006D: (7, 5, 1, 2, 9, (0x1F, 0x01, 0x01, 0x06, 0x01, 0x01, 0x1E)),  # m
    0x006E: (5, 5, 1, 2, 7, (0x1F, 0x01, 0x01, 0x01, 0x1E)),  # n
    0x006F: (5, 5, 1, 2, 7, (0x0E, 0x11, 0x11, 0x11, 0x0E)),  # o
    0x0070: (5, 6, 1, 2, 7, (0x3F, 0x09, 0x09, 0x09, 0x06)),  # p
    0x0071: (5, 6, 1, 2, 7, (0x06, 0x09, 0x09, 0x09, 0x3F)),  # q
    0x0072: (5, 5, 1, 2, 7, (0x1F, 0x04, 0x02, 0x01, 0x01)),  # r
    0x0073: (5, 5, 1, 2, 7, (0x12, 0x15, 0x15, 0x15, 0x08)),  # s
    0x0074: (4, 6, 1, 1, 6, (0x02, 0x1F, 0x22, 0x22)),  # t
    0x0075: (5, 5, 1, 2, 7, (0x0F, 0x10, 0x10, 0x10, 0x0F)),  # u
    0x0076: (5, 5, 1, 2, 7, (0x07, 0x08, 0x10, 0x08, 0x07)),  # v
    0x0077: (7, 5, 1, 2, 9, (0x0F, 0x10, 0x10, 0x0C, 0x10, 0x10, 0x0F)),  # w
    0x0078: (5, 5, 1, 2, 7, (0x11, 0x0A, 0x04, 0x0A, 0x11)),  # x
    0x0079: (5, 6, 1, 2, 7, (0x07, 0x28, 0x28, 0x28, 0x1F)),  # y
    0x007A: (5, 5, 1, 2, 7, (0x11, 0x19, 0x15, 0x13, 0x11)),  # z
    0x007B: (4, 7, 2, 0, 7, (0x08, 0x36, 0x41, 0x41)),  # {
    0x007C: (1, 7, 2, 0, 5, (0x7F,)),  # 
    0x007D: (4, 7, 1, 0, 7, (0x41, 0x41, 0x36, 0x08)),  # }
    0x007E: (6, 2, 1, 0, 8, (0x02, 0x01, 0x01, 0x02, 0x02, 0x01)),  # ~
    # Latin-1 Supplement
    0x00A0: (3, 1, -1, 7, 4, (0x00, 0x00, 0x00)),  # no-break space
    0x00A1: (1, 7, 2, 1, 5, (0x7D,)),  # ¡
    0x00A2: (5, 7, 1, 0, 7, (0x1C, 0x22, 0x7F, 0x22, 0x14)),  # ¢
    0x00A3: (6, 7, 1, 0, 8, (0x48, 0x7E, 0x49, 0x49, 0x41, 0x22)),  # £
    0x00A5: (5, 7, 1, 0, 7, (0x2B, 0x2C, 0x78, 0x2C, 0x2B)),  # ¥
    0x00A6: (1, 7, 2, 0, 5, (0x77,)),  # ¦
    0x00A8: (3, 1, 2, 0, 7, (0x01, 0x00, 0x01)),  # ¨
    0x00A9: (7, 8, 1, 0, 9, (0x7E, 0x81, 0x99, 0xA5, 0xA5, 0x81, 0x7E)),  # ©
    0x00AB: (6, 5, 1, 1, 8, (0x04, 0x0A, 0x11, 0x04, 0x0A, 0x11)),  # «
    0x00AC: (5, 3, 1, 3, 7, (0x01, 0x01, 0x01, 0x01, 0x07)),  # ¬
    0x00AE: (7, 8, 1, 0, 9, (0x7E, 0x81, 0xBD, 0x95, 0xA9, 0x81, 0x7E)),  # ®
    0x00B0: (4, 4, 1, 0, 6, (0x06, 0x09, 0x09, 0x06)),  # °
    0x00B1: (5, 7, 1, 0, 7, (0x44, 0x44, 0x5F, 0x44, 0x44)),  # ±
    0x00B4: (2, 2, 2, 0, 5, (0x02, 0x01)),  # ´
    0x00B5: (5, 6, 1, 2, 7, (0x3F, 0x08, 0x08, 0x08, 0x07)),  # µ
    0x00B6: (7, 7, 1, 0, 9, (0x06, 0x0F, 0x0F, 0x7F, 0x01, 0x01, 0x7F)),  # ¶
    0x00B7: (1, 1, 2, 3, 5, (0x01,)),  # ·
    0x00B8: (3, 3, 1, 5, 5, (0x04, 0x05, 0x02)),  # ¸
    0x00BB: (6, 5, 1, 1, 8, (0x11, 0x0A, 0x04, 0x11, 0x0A, 0x04)),  # »
    0x00BF: (5, 7, 1, 1, 7, (0x30, 0x48, 0x45, 0x40, 0x20)),  # ¿
    0x00C0: (5, 7, 1, 0, 7, (0x78, 0x25, 0x26, 0x24, 0x78)),  # À
    0x00C1: (5, 7, 1, 0, 7, (0x78, 0x24, 0x26, 0x25, 0x78)),  # Á
    0x00C2: (5, 7, 1, 0, 7, (0x78, 0x26, 0x25, 0x26, 0x78)),  # Â
    0x00C3: (6, 7, 1, 0, 7, (0x7A, 0x25, 0x25, 0x26, 0x7A, 0x01)),  # Ã
    0x00C4: (5, 7, 1, 0, 7, (0x78, 0x25, 0x24, 0x25, 0x78)),  # Ä
    0x00C5: (5, 7, 1, 0, 7, (0x7A, 0x25, 0x25, 0x25, 0x7A)),  # Å
    0x00C6: (9, 7, 1, 0, 11, (0x7E, 0x11, 0x11, 0x11, 0x7F, 0x49, 0x49, 0x41, 0x41)),  # Æ
    0x00C7: (5, 8, 1, 0, 7, (0x1E, 0xA1, 0xA1, 0x61, 0x12)),  # Ç
    0x00C8: (5, 7, 1, 0, 7, (0x7C, 0x55, 0x56, 0x44, 0x44)),  # È
    0x00C9: (5, 7, 1, 0, 7, (0x7C, 0x54, 0x56, 0x45, 0x44)),  # É
    0x00CA: (5, 7, 1, 0, 7, (0x7C, 0x56, 0x55, 0x46, 0x44)),  # Ê
    0x00CB: (5, 7, 1, 0, 7, (0x7C, 0x55, 0x54, 0x45, 0x44)),  # Ë
    0x00CC: (2, 7, 1, 0, 5, (0x01, 0x7A)),  # Ì
    0x00CD: (2, 7, 2, 0, 5, (0x7A, 0x01)),  # Í
    0x00CE: (3, 7, 1, 0, 5, (0x02, 0x79, 0x02)),  # Î
    0x00CF: (3, 7, 1, 0, 5, (0x01, 0x7C, 0x01)),  # Ï
    0x00D0: (6, 7, 0, 0, 7, (0x08, 0x7F, 0x49, 0x49, 0x41, 0x3E)),  # Ð
    0x00D1: (6, 7, 1, 0, 7, (0x7E, 0x09, 0x11, 0x22, 0x7E, 0x01)),  # Ñ
    0x00D2: (5, 7, 1, 0, 7, (0x38, 0x45, 0x46, 0x44, 0x38)),  # Ò
    0x00D3: (5, 7, 1, 0, 7, (0x38, 0x44, 0x46, 0x45, 0x38)),  # Ó
    0x00D4: (5, 7, 1, 0, 7, (0x38, 0x46, 0x45, 0x46, 0x38)),  # Ô
    0x00D5: (6, 7, 1, 0, 7, (0x3A, 0x45, 0x45, 0x46, 0x3A, 0x01)),  # Õ
    0x00D6: (5, 7, 1, 0, 7, (0x38, 0x45, 0x44, 0x45, 0x38)),  # Ö
    0x00D7: (5, 5, 1, 1, 7, (0x11, 0x0A, 0x04, 0x0A, 0x11)),  # ×
    0x00D8: (7, 7, 0, 0, 7, (0x40, 0x3E, 0x51, 0x49, 0x45, 0x3E, 0x01)),  # Ø
    0x00D9: (5, 7, 1, 0, 7, (0x3C, 0x41, 0x42, 0x40, 0x3C)),  # Ù
    0x00DA: (5, 7, 1, 0, 7, (0x3C, 0x40, 0x42, 0x41, 0x3C)),  # Ú
    0x00DB: (5, 7, 1, 0, 7, (0x38, 0x42, 0x41, 0x42, 0x38)),  # Û
    0x00DC: (5, 7, 1, 0, 7, (0x3C, 0x41, 0x40, 0x41, 0x3C)),  # Ü
    0x00DD: (5, 7, 1, 0, 7, (0x0C, 0x10, 0x62, 0x11, 0x0C)),  # Ý
    0x00DE: (5, 7, 1, 0, 7, (0x7F, 0x12, 0x12, 0x12, 0x0C)),  # Þ
    0x00DF: (5, 7, 1, 0, 7, (0x7E, 0x01, 0x49, 0x49, 0x36)),  # ß
    0x00E0: (5, 7, 1, 0, 7, (0x20, 0x55, 0x56, 0x54, 0x78)),  # à
    0x00E1: (5, 7, 1, 0, 7, (0x20, 0x54, 0x56, 0x55, 0x78)),  # á
    0x00E2: (5, 7, 1, 0, 7, (0x20, 0x56, 0x55, 0x56, 0x78)),  # â
    0x00E3: (6, 7, 1, 0, 7, (0x22, 0x55, 0x55, 0x56, 0x7A, 0x01)),  # ã
    0x00E4: (5, 7, 1, 0, 7, (0x20, 0x55, 0x54, 0x55, 0x78)),  # ä
    0x00E5: (5, 7, 1, 0, 7, (0x22, 0x55, 0x55, 0x55, 0x7A)),  # å
    0x00E6: (9, 5, 1, 2, 11, (0x08, 0x15, 0x15, 0x15, 0x0E, 0x15, 0x15, 0x15, 0x06)),  # æ
    0x00E7: (5, 8, 1, 0, 7, (0x0E, 0x91, 0xB1, 0x51, 0x0A)),  # ç
    0x00E8: (5, 7, 1, 0, 7, (0x38, 0x55, 0x56, 0x54, 0x18)),  # è
    0x00E9: (5, 7, 1, 0, 7, (0x38, 0x54, 0x56, 0x55, 0x18)),  # é
    0x00EA: (5, 7, 1, 0, 7, (0x38, 0x56, 0x55, 0x56, 0x18)),  # ê
    0x00EB: (5, 7, 1, 0, 7, (0x38, 0x55, 0x54, 0x55, 0x18)),  # ë
    0x00EC: (2, 7, 1, 0, 5, (0x01, 0x7A)),  # ì
    0x00ED: (2, 7, 2, 0, 5, (0x7A, 0x01)),  # í
    0x00EE: (3, 7, 1, 0, 5, (0x02, 0x79, 0x02)),  # î
    0x00EF: (3, 7, 1, 0, 5, (0x01, 0x7C, 0x01)),  # ï
    0x00F0: (6, 7, 1, 0, 7, (0x30, 0x48, 0x4A, 0x4A, 0x7F, 0x02)),  # ð
    0x00F1: (6, 7, 1, 0, 7, (0x7E, 0x05, 0x05, 0x06, 0x7A, 0x01)),  # ñ
    0x00F2: (5, 7, 1, 0, 7, (0x38, 0x45, 0x46, 0x44, 0x38)),  # ò
    0x00F3: (5, 7, 1, 0, 7, (0x38, 0x44, 0x46, 0x45, 0x38)),  # ó
    0x00F4: (5, 7, 1, 0, 7, (0x38, 0x46, 0x45, 0x46, 0x38)),  # ô
    0x00F5: (6, 7, 1, 0, 7, (0x3A, 0x45, 0x45, 0x46, 0x3A, 0x01)),  # õ
    0x00F6: (5, 7, 1, 0, 7, (0x38, 0x45, 0x44, 0x45, 0x38)),  # ö
    0x00F7: (5, 5, 1, 1, 7, (0x04, 0x04, 0x15, 0x04, 0x04)),  # ÷
    0x00F8: (5, 7, 1, 1, 7, (0x5C, 0x32, 0x2A, 0x26, 0x1D)),  # ø
    0x00F9: (5, 7, 1, 0, 7, (0x3C, 0x41, 0x42, 0x40, 0x3C)),  # ù
    0x00FA: (5, 7, 1, 0, 7, (0x3C, 0x40, 0x42, 0x41, 0x3C)),  # ú
    0x00FB: (5, 7, 1, 0, 7, (0x38, 0x42, 0x41, 0x42, 0x38)),  # û
    0x00FC: (5, 7, 1, 0, 7, (0x3C, 0x41, 0x40, 0x41, 0x3C)),  # ü
    0x00FD: (5, 8, 1, 0, 7, (0x1C, 0xA0, 0xA2, 0xA1, 0x7C)),  # ý
    0x00FE: (5, 8, 1, 0, 7, (0xFF, 0x24, 0x24, 0x24, 0x18)),  # þ
    0x00FF: (5, 8, 1, 0, 7, (0x1C, 0xA1, 0xA0, 0xA1, 0x7C)),  # ÿ
    # Latin Extended-A
    0x0108: (5, 7, 1, 0, 7, (0x38, 0x46, 0x45, 0x46, 0x28)),  # Ĉ
    0x0109: (5, 7, 1, 0, 7, (0x38, 0x46, 0x45, 0x46, 0x28)),  # ĉ
    0x010C: (5, 7, 1, 0, 7, (0x38, 0x45, 0x46, 0x45, 0x28)),  # Č
    0x010D: (5, 7, 1, 0, 7, (0x38, 0x45, 0x46, 0x45, 0x28)),  # č
    0x010E: (5, 7, 1, 0, 7, (0x7C, 0x45, 0x46, 0x45, 0x38)),  # Ď
    0x010F: (9, 7, 1, 0, 12, (0x38, 0x44, 0x44, 0x44, 0x7F, 0x00, 0x00, 0x04, 0x03)),  # ď
    0x011A: (5, 7, 1, 0, 7, (0x7C, 0x55, 0x56, 0x45, 0x44)),  # Ě
    0x011B: (5, 7, 1, 0, 7, (0x38, 0x55, 0x56, 0x55, 0x18)),  # ě
    0x011C: (5, 7, 1, 0, 7, (0x38, 0x46, 0x45, 0x56, 0x74)),  # Ĝ
    0x011D: (5, 8, 1, 0, 7, (0x18, 0xA6, 0xA5, 0xA6, 0x7C)),  # ĝ
    0x0124: (5, 7, 1, 0, 7, (0x78, 0x22, 0x21, 0x22, 0x78)),  # Ĥ
    0x0125: (5, 7, 1, 0, 7, (0x7C, 0x08, 0x0A, 0x09, 0x72)),  # ĥ
    0x0131: (1, 5, 2, 2, 5, (0x1F,)),  # ı
    0x0134: (5, 7, 1, 0, 7, (0x22, 0x41, 0x42, 0x40, 0x3C)),  # Ĵ
    0x0135: (5, 8, 1, 0, 7, (0x42, 0x81, 0x82, 0x80, 0x7C)),  # ĵ
    0x0147: (5, 7, 1, 0, 7, (0x7C, 0x09, 0x12, 0x21, 0x7C)),  # Ň
    0x0148: (5, 7, 1, 0, 7, (0x7C, 0x05, 0x06, 0x05, 0x78)),  # ň
    0x0152: (9, 7, 1, 0, 11, (0x3E, 0x41, 0x41, 0x41, 0x7F, 0x49, 0x49, 0x41, 0x41)),  # Œ
    0x0153: (9, 5, 1, 2, 11, (0x0E, 0x11, 0x11, 0x11, 0x0E, 0x15, 0x15, 0x15, 0x06)),  # œ
    0x0158: (5, 7, 1, 0, 7, (0x7C, 0x25, 0x26, 0x25, 0x58)),  # Ř
    0x0159: (5, 7, 1, 0, 7, (0x7C, 0x11, 0x0A, 0x05, 0x04)),  # ř
    0x015C: (5, 7, 1, 0, 7, (0x48, 0x56, 0x55, 0x56, 0x20)),  # Ŝ
    0x015D: (5, 7, 1, 0, 7, (0x48, 0x56, 0x55, 0x56, 0x20)),  # ŝ
    0x0160: (5, 7, 1, 0, 7, (0x48, 0x55, 0x56, 0x55, 0x20)),  # Š
    0x0161: (5, 7, 1, 0, 7, (0x48, 0x55, 0x56, 0x55, 0x20)),  # š
    0x0164: (5, 7, 1, 0, 7, (0x04, 0x05, 0x7E, 0x05, 0x04)),  # Ť
    0x0165: (8, 7, 1, 0, 11, (0x04, 0x3E, 0x44, 0x44, 0x00, 0x00, 0x04, 0x03)),  # ť
    0x016C: (5, 7, 1, 0, 7, (0x39, 0x42, 0x42, 0x42, 0x39)),  # Ŭ
    0x016D: (5, 7, 1, 0, 7, (0x39, 0x42, 0x42, 0x42, 0x39)),  # ŭ
    0x016E: (5, 7, 1, 0, 7, (0x38, 0x42, 0x45, 0x42, 0x38)),  # Ů
    0x016F: (5, 7, 1, 0, 7, (0x38, 0x42, 0x45, 0x42, 0x38)),  # ů
    0x0178: (5, 7, 1, 0, 7, (0x0C, 0x11, 0x60, 0x11, 0x0C)),  # Ÿ
    0x017D: (5, 7, 1, 0, 7, (0x44, 0x65, 0x56, 0x4D, 0x44)),  # Ž
    0x017E: (5, 7, 1, 0, 7, (0x44, 0x65, 0x56, 0x4D, 0x44)),  # ž
    # Spacing modifier letters
    0x02C6: (3, 2, 2, 0, 7, (0x02, 0x01, 0x02)),  # ˆ
    0x02C7: (3, 2, 2, 0, 7, (0x01, 0x02, 0x01)),  # ˇ
    0x02D8: (5, 2, 1, 0, 7, (0x01, 0x02, 0x02, 0x02, 0x01)),  # ˘
    0x02DA: (3, 3, 1, 0, 5, (0x02, 0x05, 0x02)),  # ˚
    0x02DC: (6, 2, 1, 0, 8, (0x02, 0x01, 0x01, 0x02, 0x02, 0x01)),  # ˜
    # Punctuation, currency and letterlike symbols
    0x2013: (4, 1, 1, 3, 6, (0x01, 0x01, 0x01, 0x01)),  # –
    0x2014: (6, 1, 1, 3, 8, (0x01, 0x01, 0x01, 0x01, 0x01, 0x01)),  # —
    0x2018: (2, 3, 2, 0, 5, (0x06, 0x01)),  # ‘
    0x2019: (2, 3, 1, 0, 5, (0x04, 0x03)),  # ’
    0x201A: (2, 3, 1, 5, 5, (0x04, 0x03)),  # ‚
    0x201C: (4, 3, 2, 0, 7, (0x06, 0x01, 0x06, 0x01)),  # “
    0x201D: (4, 3, 1, 0, 7, (0x04, 0x03, 0x04, 0x03)),  # ”
    0x201E: (4, 3, 1, 5, 7, (0x04, 0x03, 0x04, 0x03)),  # „
    0x2020: (5, 8, 1, 0, 7, (0x04, 0x04, 0xFF, 0x04, 0x04)),  # †
    0x2021: (5, 8, 1, 0, 7, (0x24, 0x24, 0xFF, 0x24, 0x24)),  # ‡
    0x2022: (2, 2, 2, 3, 6, (0x03, 0x03)),  # •
    0x2026: (7, 1, 1, 6, 9, (0x01, 0x00, 0x00, 0x01, 0x00, 0x00, 0x01)),  # …
    0x2030: (11, 7, 1, 0, 13, (0x06, 0x29, 0x16, 0x08, 0x34, 0x4A, 0x30, 0x00, 0x30, 0x48, 0x30)),  # ‰
    0x2039: (3, 5, 3, 1, 7, (0x04, 0x0A, 0x11)),  # ‹
    0x203A: (3, 5, 1, 1, 7, (0x11, 0x0A, 0x04)),  # ›
    0x20AC: (6, 7, 1, 0, 8, (0x14, 0x3E, 0x55, 0x45, 0x41, 0x22)),  # €
    0x20B1: (7, 7, 1, 0, 9, (0x04, 0x7F, 0x15, 0x15, 0x15, 0x0E, 0x04)),  # ₱
    0x20B7: (8, 8, 0, 0, 9, (0x10, 0xE0, 0x50, 0xE6, 0x59, 0xE9, 0x49, 0x32)),  # ₷
    0x2117: (7, 8, 1, 0, 9, (0x7E, 0x81, 0xBD, 0x95, 0x89, 0x81, 0x7E)),  # ℗
    0x2122: (9, 4, 1, 0, 11, (0x01, 0x0F, 0x01, 0x00, 0x0F, 0x02, 0x04, 0x02, 0x0F)),  # ™
}


def _build_table() -> GlyphTable:
    glyphs = (
        Glyph(code_point, width, height, x_offset, y_offset, x_advance, columns)
        for code_point, (width, height, x_offset, y_offset, x_advance, columns) in PROPORTIONAL_GLYPHS.items()
    )
    return GlyphTable("proportional", glyphs, cell_width=8, cell_height=8)


PROPORTIONAL_FONT = _build_table()
