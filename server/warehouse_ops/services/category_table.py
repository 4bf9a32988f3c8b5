"""
Curated material-code catalogue.

Exact MATCODE -> category assignments. A code listed here is classified from
this table alone, even when a prefix rule in category_rules would pick a
different category for it; entries exist precisely to correct those cases.

The table is built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from warehouse_ops.services.category_labels import CategoryLabel as C

_EXACT_CODES: dict[str, C] = {
    # ==================== FREEZER ====================
    "B30FZ4M6K": C.freezer,
    "B30FM4M6K": C.freezer,
    "B300G5M6K": C.freezer,
    "B30GK2M6J": C.freezer,
    "BD07U2M00": C.freezer,
    "BF0GS8M00": C.freezer,
    "BF0GS5M00": C.freezer,
    "B30FZ6E6A": C.freezer,
    "B30FMAE6A": C.freezer,
    "B300GDE6A": C.freezer,
    "B30GKJE2J": C.freezer,
    "BF0G30E04": C.freezer,
    "B30GLFE2J": C.freezer,
    "B30GMGE2J": C.freezer,
    "B30JU3E00": C.freezer,
    "B300A3E2J": C.freezer,
    "B40791E6H": C.freezer,
    "BW0ACEE00": C.freezer,
    "BW0ADQE00": C.freezer,
    "TA5602027": C.freezer,
    "BY0H41E58": C.freezer,
    "BY0K10E00": C.freezer,
    "BY0ETAE18": C.freezer,
    "BY0H53E58": C.freezer,
    "BY0K28E00": C.freezer,
    "TD0043841": C.freezer,
    "TD0043842": C.freezer,
    "TD0043843": C.freezer,
    "TD0043844": C.freezer,
    "TD0043845": C.freezer,
    "TD0043846": C.freezer,
    "TD0043847": C.freezer,
    "TD0045303": C.freezer,
    "TD0045304": C.freezer,
    "TD0045305": C.freezer,
    "TD0045306": C.freezer,
    "BD07U0M00": C.freezer,
    "BD07U1M00": C.freezer,
    "BD07U3M00": C.freezer,
    "BD07U4M00": C.freezer,
    "BF0GS6M00": C.freezer,
    "BF0GS7M00": C.freezer,
    "BF0GS9M00": C.freezer,
    "BF0GS0M00": C.freezer,
    "BF0GS2M00": C.freezer,
    "BF0GS3M00": C.freezer,
    "BW08D5M00": C.freezer,
    "BW08D0M00": C.freezer,
    "BW08D2M00": C.freezer,
    "BW08D3M00": C.freezer,
    "BF0GS1M00": C.freezer,
    "BW08D1M00": C.freezer,
    "BW08D4M00": C.freezer,
    "B30GJ6M56": C.freezer,
    "B30GM0M6J": C.freezer,
    "B30GL8M56": C.freezer,
    "BE06MHE1T": C.freezer,
    "B30GL0M6J": C.freezer,
    "BB09UGM02": C.freezer,
    "BF0GS4M00": C.freezer,
    "BW03N4E0N": C.freezer,
    "B401N9E6M": C.freezer,
    "BY0JQ5E00RU": C.freezer,
    "TD0014191": C.freezer,
    "BS0BB3000": C.freezer,

    # ==================== REFRIGERATOR ====================
    "B00TU8E8N": C.refrigerator,
    "B00U05B8V": C.refrigerator,
    "BS08X2EA6": C.refrigerator,
    "BS08Z2EA6": C.refrigerator,
    "BS09TBM90": C.refrigerator,
    "BS0B830AE": C.refrigerator,
    "BA0A6JM04": C.refrigerator,
    "BS0B9208Z": C.refrigerator,
    "TD0025229": C.refrigerator,
    "BM03U1M4Z": C.refrigerator,
    "BM03U0M4Z": C.refrigerator,
    "BS08ZLEAE": C.refrigerator,
    "BS08ZKE7R": C.refrigerator,
    "BH0348E7J": C.refrigerator,
    "BS0909EAE": C.refrigerator,
    "BS08ZHEA9": C.refrigerator,
    "BS08ZKEAE": C.refrigerator,
    "BL0561EA6": C.refrigerator,
    "BL05S1EAE": C.refrigerator,
    "BL0570EA6": C.refrigerator,
    "BL05T0EAE": C.refrigerator,
    "BM03L0E3X": C.refrigerator,
    "BM03W1EAE": C.refrigerator,
    "BL0554EA6": C.refrigerator,
    "BM0400EAE": C.refrigerator,
    "BL04Z5EA6": C.refrigerator,
    "BM03M0EAC": C.refrigerator,
    "BM03N0EAC": C.refrigerator,
    "BH0331E98": C.refrigerator,
    "BM03U4M4Z": C.refrigerator,
    "BS0BE8000": C.refrigerator,
    "BS0BE9000": C.refrigerator,
    "BC1066M02": C.refrigerator,
    "BM03B2M4Z": C.refrigerator,
    "BM03B3M4Z": C.refrigerator,
    "BL06F40AE": C.refrigerator,
    "BL04T5EAE": C.refrigerator,
    "BL06F50AE": C.refrigerator,
    "BL06FA0AE": C.refrigerator,
    "BL06D0E1G": C.refrigerator,
    "BL06D10AA": C.refrigerator,
    "BC1063M02": C.refrigerator,
    "BL06D50AA": C.refrigerator,
    "BL04Z6E81": C.refrigerator,
    "BL04Z5EAE": C.refrigerator,
    "BL04Z7E81": C.refrigerator,
    "BL04Z4EAE": C.refrigerator,
    "BC1064M02": C.refrigerator,
    "BC1065M02": C.refrigerator,
    "TD0044921": C.refrigerator,
    "BC1159E00": C.refrigerator,
    "B70U05E84": C.refrigerator,
    "B70U04E84": C.refrigerator,
    "BC1156E00": C.refrigerator,
    "BC11E2E00": C.refrigerator,
    "BH03Y0E7J": C.refrigerator,
    "BH03Y8E01": C.refrigerator,
    "BH04AH000": C.refrigerator,
    "BS0BF6000": C.refrigerator,
    "BS0BF7000": C.refrigerator,
    "TD0046321": C.refrigerator,
    "BL06FK0AE": C.refrigerator,
    "BJ0XC0E1G": C.refrigerator,
    "BC0XD30AE": C.refrigerator,
    "BJ0XC40AE": C.refrigerator,
    "BJ0XD0E1G": C.refrigerator,
    "BJ0XD30AE": C.refrigerator,
    "BJ0XE0E1G": C.refrigerator,
    "BJ0XE60AE": C.refrigerator,
    "BC0XE50AE": C.refrigerator,
    "TD0025230": C.refrigerator,
    "TD0025231": C.refrigerator,
    "TD0025232": C.refrigerator,
    "TD0025233": C.refrigerator,
    "BM03HHEA5": C.refrigerator,
    "BK0YH2008": C.refrigerator,
    "BK0YH6008": C.refrigerator,
    "BS08ZNE7R": C.refrigerator,
    "BS099LE93": C.refrigerator,
    "BM03HEEA5": C.refrigerator,
    "BM03H7EA5": C.refrigerator,
    "BK0YH0008": C.refrigerator,
    "BS0912EAE": C.refrigerator,
    "BS0BG6000": C.refrigerator,
    "TD0046322": C.refrigerator,
    "TD0046323": C.refrigerator,
    "BL04Z8E00": C.refrigerator,
    "BL04ZBE00": C.refrigerator,
    "BM03U2M4Z": C.refrigerator,
    "BH02X6E98": C.refrigerator,
    "BA0A6DM00": C.refrigerator,
    "BA0A6HM00": C.refrigerator,
    "BA0A65M01": C.refrigerator,
    "BA0A64M01": C.refrigerator,
    "BS0900EAE": C.refrigerator,
    "BS0910EAE": C.refrigerator,
    "BS08Z0EAE": C.refrigerator,
    "BS0930EAE": C.refrigerator,
    "BS09A3E8A": C.refrigerator,
    "BM03M0EAE": C.refrigerator,
    "BL05E0E92": C.refrigerator,
    "BL05E0E8H": C.refrigerator,
    "BL05D0EA0": C.refrigerator,
    "BL05D0E7N": C.refrigerator,
    "BS09A2E8A": C.refrigerator,
    "BS09A1E8A": C.refrigerator,
    "BS09R0E84": C.refrigerator,
    "BS09R1E1G": C.refrigerator,
    "BS09R4E8A": C.refrigerator,
    "BA0A6AM01": C.refrigerator,
    "BA0A66M01": C.refrigerator,
    "BA0A6CM01": C.refrigerator,
    "BA0A67M01": C.refrigerator,
    "BA0A68M01": C.refrigerator,
    "BA0A69M00": C.refrigerator,
    "BA0A61M01": C.refrigerator,
    "BA0A62M01": C.refrigerator,
    "BA0A6BM00": C.refrigerator,
    "BA0A6CM00": C.refrigerator,
    "BA0A6EM00": C.refrigerator,
    "BA0A6FM00": C.refrigerator,
    "BA0A6GM00": C.refrigerator,
    "BA0A6JM00": C.refrigerator,
    "BA0A6KM00": C.refrigerator,
    "BA0A6LM00": C.refrigerator,
    "BA0A6MM00": C.refrigerator,
    "BA0A6NM00": C.refrigerator,
    "BA0A6PM00": C.refrigerator,
    "BA0A6RM00": C.refrigerator,
    "BA0A6SM00": C.refrigerator,
    "BA0A6TM00": C.refrigerator,
    "BA0A6UM00": C.refrigerator,
    "BA0A6VM00": C.refrigerator,
    "BA0A6WM00": C.refrigerator,
    "BA0A6XM00": C.refrigerator,
    "BA0A6YM00": C.refrigerator,
    "BA0A6ZM00": C.refrigerator,
    "BS08X2EAE": C.refrigerator,
    "BM03N0EAE": C.refrigerator,
    "BA0A69M01": C.refrigerator,
    "BS09R4E1G": C.refrigerator,
    "BA0A6BM01": C.refrigerator,
    "BS09R4E96": C.refrigerator,
    "BS09R5E96": C.refrigerator,
    "BS0932EAE": C.refrigerator,
    "BS08ZJEAE": C.refrigerator,
    "BA0A6GM04": C.refrigerator,
    "BS0900E7R": C.refrigerator,
    "BS0902EA9": C.refrigerator,
    "BS08ZQE99": C.refrigerator,
    "BS0901E99": C.refrigerator,
    "BS0901EA9": C.refrigerator,
    "BS08ZEE7R": C.refrigerator,
    "BS08ZFE7R": C.refrigerator,
    "BS0901E7R": C.refrigerator,
    "BM03Y0EAE": C.refrigerator,
    "BJ0VG9ZAE": C.refrigerator,
    "BS09RDE9H": C.refrigerator,
    "BS09RBE9H": C.refrigerator,
    "BS09RCE9H": C.refrigerator,
    "BS09RFE9H": C.refrigerator,
    "BS09RGE9H": C.refrigerator,
    "BS099ME93": C.refrigerator,
    "BS099NE93": C.refrigerator,
    "BS0990E95": C.refrigerator,
    "BM03U3M4Z": C.refrigerator,
    "BH0341E8V": C.refrigerator,
    "BS0931EAE": C.refrigerator,
    "BS099PE93": C.refrigerator,
    "BS0933EAE": C.refrigerator,
    "BS08ZHEAE": C.refrigerator,
    "BC1062M02": C.refrigerator,
    "BA0A6HM04": C.refrigerator,
    "BS0906EAE": C.refrigerator,
    "BS0914EAE": C.refrigerator,
    "BS099JE93": C.refrigerator,
    "BS09REE9H": C.refrigerator,
    "BS0913EAE": C.refrigerator,
    "BS0908EAE": C.refrigerator,
    "BM03Z0EAE": C.refrigerator,
    "BS0907EAE": C.refrigerator,
    "TD0027247": C.refrigerator,
    "BS08ZTE99": C.refrigerator,
    "BS0900E8U": C.refrigerator,
    "BS099QE93": C.refrigerator,
    "BS08ZJE7R": C.refrigerator,
    "BS0903E7R": C.refrigerator,
    "BS090AEAE": C.refrigerator,
    "BS0903E99": C.refrigerator,
    "BS0903EA9": C.refrigerator,
    "BS0904E99": C.refrigerator,
    "BM03HFEA5": C.refrigerator,
    "BM03HGEA5": C.refrigerator,
    "BS08ZKEA9": C.refrigerator,
    "BS08ZSE99": C.refrigerator,
    "BS0902E7R": C.refrigerator,
    "BS08Z2E8U": C.refrigerator,
    "BS0902E8U": C.refrigerator,
    "BS0904E7R": C.refrigerator,
    "BS08Z0E8U": C.refrigerator,
    "BS0990EA4": C.refrigerator,
    "BJ0XE0EAE": C.refrigerator,
    "BL06F0EAE": C.refrigerator,
    "BL06F1EAE": C.refrigerator,
    "BM03HKEA5": C.refrigerator,
    "BJ0XC0EAE": C.refrigerator,
    "BJ0XD0EAE": C.refrigerator,
    "BS08ZRE99": C.refrigerator,
    "BS08ZGEA9": C.refrigerator,
    "BS0902E99": C.refrigerator,
    "BS08ZEEAE": C.refrigerator,
    "BM03HJEA5": C.refrigerator,
    "B00TU3E82": C.refrigerator,
    "BH0270E8N": C.refrigerator,
    "BH0280E8N": C.refrigerator,
    "BA0A6EM01": C.refrigerator,
    "BM03L0EAE": C.refrigerator,
    "BA0A6DM01": C.refrigerator,
    "BA0A60M01": C.refrigerator,
    "BA0A63M01": C.refrigerator,
    "BA0A6AM00": C.refrigerator,
    "BA0A6QM00": C.refrigerator,
    "BS09R0E96": C.refrigerator,
    "BS09R5E9H": C.refrigerator,
    "BS09A0E96": C.refrigerator,
    "BS0BG5000": C.refrigerator,
    "BS09R4E9H": C.refrigerator,
    "BJ0VH4Z8A": C.refrigerator,
    "BJ0XD50AE": C.refrigerator,
    "BC1153E02": C.refrigerator,
    "BC11FLE00": C.refrigerator,
    "BC115TE02": C.refrigerator,
    "BL06VA08Z": C.refrigerator,
    "BC115XE02": C.refrigerator,
    "BC115UE02": C.refrigerator,
    "BC1154E02": C.refrigerator,
    "BC11DEE00": C.refrigerator,
    "TD0013992": C.refrigerator,
    "TD0013991": C.refrigerator,
    "FB28UZM00": C.refrigerator,
    "FA08G9M00": C.refrigerator,

    "FS03B7E": C.water_system,

    # ==================== HOME AIR CONDITIONER ====================
    "AD0KG4U00": C.home_air_conditioner,
    "AA93Z2E07": C.home_air_conditioner,
    "AA1P5NE09": C.home_air_conditioner,
    "AAA363E03": C.home_air_conditioner,
    "AAA7B1E00": C.home_air_conditioner,
    "AAA369E03": C.home_air_conditioner,
    "AAA7B8E00": C.home_air_conditioner,
    "AAAXN4E07": C.home_air_conditioner,
    "AAAXG3E07": C.home_air_conditioner,
    "AAAXN2E07": C.home_air_conditioner,
    "AAAXG1E07": C.home_air_conditioner,
    "AAC1NUE00": C.home_air_conditioner,
    "AAC1QBE00": C.home_air_conditioner,
    "AAC1NWE00": C.home_air_conditioner,
    "AAC1QDE00": C.home_air_conditioner,
    "AAAV51E07": C.home_air_conditioner,
    "AAAV11E07": C.home_air_conditioner,
    "AABT67E00": C.home_air_conditioner,
    "AABQZ6E00": C.home_air_conditioner,
    "AABT6GE00": C.home_air_conditioner,
    "AABQZDE00": C.home_air_conditioner,
    "AA9401E09": C.home_air_conditioner,
    "AA1PE2E09": C.home_air_conditioner,
    "AAA2HAE00": C.home_air_conditioner,
    "AAA7CDE00": C.home_air_conditioner,
    "AAAXN5E07": C.home_air_conditioner,
    "AAAXG4E07": C.home_air_conditioner,
    "AAAXN1E07": C.home_air_conditioner,
    "AAAXG2E07": C.home_air_conditioner,
    "AAC1PXE00": C.home_air_conditioner,
    "AAC1RCE00": C.home_air_conditioner,
    "AABT77E00": C.home_air_conditioner,
    "AABR16E00": C.home_air_conditioner,
    "AABT7CE00": C.home_air_conditioner,
    "AABR1BE00": C.home_air_conditioner,
    "AA9415E0B": C.home_air_conditioner,
    "AA9413E03": C.home_air_conditioner,
    "AAA2JWE0E": C.home_air_conditioner,
    "AAA2GWE0B": C.home_air_conditioner,
    "AAAXV1E07": C.home_air_conditioner,
    "AAAXB1E07": C.home_air_conditioner,
    "AAA35NE03": C.home_air_conditioner,
    "AAA33NE0E": C.home_air_conditioner,
    "AAAXM1E07": C.home_air_conditioner,
    "AAAXL1E07": C.home_air_conditioner,
    "AAAVD0E09": C.home_air_conditioner,
    "AAAV90E08": C.home_air_conditioner,
    "AAAVD4E00": C.home_air_conditioner,
    "AAAV93E00": C.home_air_conditioner,
    "AD0FFCE00": C.home_air_conditioner,
    "AD0L50E00": C.home_air_conditioner,
    "AD0P20E00": C.home_air_conditioner,
    "AD0FN0E6U": C.home_air_conditioner,
    "AD0FN0E03": C.home_air_conditioner,
    "AD0FN1E6U": C.home_air_conditioner,
    "AD0FN2E6U": C.home_air_conditioner,
    "AD0MH0E6U": C.home_air_conditioner,
    "AD0P50E00": C.home_air_conditioner,
    "AD0FP0E03": C.home_air_conditioner,
    "AD0ME2E01": C.home_air_conditioner,
    "AD0KG5E00": C.home_air_conditioner,
    "AD0ME0E00": C.home_air_conditioner,
    "AD0ME1E01": C.home_air_conditioner,
    "AD0P80E00": C.home_air_conditioner,
    "AD0P82E00": C.home_air_conditioner,
    "AD0P30E00": C.home_air_conditioner,
    "AD0FQ0E03": C.home_air_conditioner,
    "AD0KH0E00": C.home_air_conditioner,
    "AD0MF1E03": C.home_air_conditioner,
    "AD0MF0E00": C.home_air_conditioner,
    "AD0MF2E03": C.home_air_conditioner,
    "AD0MP4E00": C.home_air_conditioner,
    "AD0P40E00": C.home_air_conditioner,
    "AD0MG2E00": C.home_air_conditioner,
    "AAC1ULE00": C.home_air_conditioner,
    "AAC1X8E00": C.home_air_conditioner,
    "AAC1TUE00": C.home_air_conditioner,
    "AAC1WCE00": C.home_air_conditioner,
    "AAC1PAE02": C.home_air_conditioner,
    "AAC1R7E01": C.home_air_conditioner,
    "AAC1PZE00": C.home_air_conditioner,
    "AAC1REE00": C.home_air_conditioner,
    "AACH42E00": C.home_air_conditioner,
    "AACDP3E00": C.home_air_conditioner,
    "AABZ25E00": C.home_air_conditioner,
    "AABZ34E00": C.home_air_conditioner,
    "AD0P70E00": C.home_air_conditioner,
    "AA9V2YM00": C.home_air_conditioner,
    "AA9V2QM00": C.home_air_conditioner,
    "AA9V27M01": C.home_air_conditioner,
    "AD0LF9M00": C.home_air_conditioner,
    "AA9791E03": C.home_air_conditioner,
    "AD0JDXU00": C.home_air_conditioner,
    "AD0KH4U00": C.home_air_conditioner,
    "AD0KG3U00": C.home_air_conditioner,
    "AA9V2JM03": C.home_air_conditioner,
    "AA9V2KM03": C.home_air_conditioner,
    "AA9V2SM00": C.home_air_conditioner,
    "AA9V2RM00": C.home_air_conditioner,
    "AA9V2JM00": C.home_air_conditioner,
    "AA9V2GM00": C.home_air_conditioner,
    "AA9V22M00": C.home_air_conditioner,
    "AA9V2FM00": C.home_air_conditioner,
    "AA9V2EM00": C.home_air_conditioner,
    "AA9V2BM00": C.home_air_conditioner,
    "AA9V2AM00": C.home_air_conditioner,
    "AA9V27M00": C.home_air_conditioner,
    "AA9V26M00": C.home_air_conditioner,
    "AA9V2KM00": C.home_air_conditioner,
    "AA9V24M01": C.home_air_conditioner,
    "AA9V23M01": C.home_air_conditioner,
    "AA9V22M01": C.home_air_conditioner,
    "AA9V28M01": C.home_air_conditioner,
    "AA9V21M00": C.home_air_conditioner,
    "AA9V24M00": C.home_air_conditioner,
    "AA9V25M00": C.home_air_conditioner,
    "AA9V28M00": C.home_air_conditioner,
    "AA9V29M00": C.home_air_conditioner,
    "AA9V2CM00": C.home_air_conditioner,
    "AA9V2MM00": C.home_air_conditioner,
    "AA9V2NM00": C.home_air_conditioner,
    "AD0LF1M00": C.home_air_conditioner,
    "AD0LF2M00": C.home_air_conditioner,
    "AD0LF3M00": C.home_air_conditioner,
    "AD0LF4M00": C.home_air_conditioner,
    "AD0LF6M00": C.home_air_conditioner,
    "AD0LF7M00": C.home_air_conditioner,
    "AD0LF8M00": C.home_air_conditioner,
    "FA08G7M00": C.home_air_conditioner,
    "FA08G8M00": C.home_air_conditioner,
    "AA9416E0B": C.home_air_conditioner,
    "AA9240E03": C.home_air_conditioner,
    "AA9792E03": C.home_air_conditioner,
    "AA9400E09": C.home_air_conditioner,
    "AA9783E03": C.home_air_conditioner,
    "AA9230E03": C.home_air_conditioner,
    "AA9782E03": C.home_air_conditioner,
    "AA9V2VM00": C.home_air_conditioner,
    "AA9V2XM00": C.home_air_conditioner,
    "AA9V2ZM00": C.home_air_conditioner,
    "AA9V20M01": C.home_air_conditioner,
    "AD0LF5M00": C.home_air_conditioner,
    "AA9V2PM00": C.home_air_conditioner,
    "AA9V2TM00": C.home_air_conditioner,
    "AA9V2UM00": C.home_air_conditioner,
    "AA9V2WM00": C.home_air_conditioner,
    "AA9V21M01": C.home_air_conditioner,
    "AA9V25M01": C.home_air_conditioner,
    "AA9V26M01": C.home_air_conditioner,
    "AA9V29M01": C.home_air_conditioner,
    "AA9V20M00": C.home_air_conditioner,
    "AD0L90E00": C.home_air_conditioner,
    "AA9X52E16": C.home_air_conditioner,
    "AA9X50E16": C.home_air_conditioner,
    "AD0LA0E00": C.home_air_conditioner,
    "AA9X40E16": C.home_air_conditioner,
    "AD0JDYE00": C.home_air_conditioner,
    "AD0L60E00": C.home_air_conditioner,
    "AA8WE1E16": C.home_air_conditioner,
    "AA9X30E16": C.home_air_conditioner,
    "AAA2HQE0E": C.home_air_conditioner,
    "AAA2JME0E": C.home_air_conditioner,
    "AAA33HE0E": C.home_air_conditioner,
    "AAA35EE03": C.home_air_conditioner,
    "AAA7C1E00": C.home_air_conditioner,
    "AD0FL1E01": C.home_air_conditioner,
    "AD0FQ1E03": C.home_air_conditioner,
    "AD0L80E00": C.home_air_conditioner,
    "AD0FFLE00": C.home_air_conditioner,
    "AD0KH6E00": C.home_air_conditioner,
    "AD0JDGE00": C.home_air_conditioner,
    "AD0KG0E00": C.home_air_conditioner,
    "AD0FF0E00": C.home_air_conditioner,
    "AA1PXAE03": C.home_air_conditioner,
    "AA9421E03": C.home_air_conditioner,
    "AA9231E03": C.home_air_conditioner,
    "AA9780E03": C.home_air_conditioner,
    "AD0JDRE00": C.home_air_conditioner,
    "AD0KH2E00": C.home_air_conditioner,
    "AD0KG1E00": C.home_air_conditioner,
    "AD0FF1E00": C.home_air_conditioner,
    "AA9421E0E": C.home_air_conditioner,
    "AA9241E03": C.home_air_conditioner,
    "AA9790E03": C.home_air_conditioner,
    "AA9793E03": C.home_air_conditioner,
    "AA9781E03": C.home_air_conditioner,
    "AA93Z0E0B": C.home_air_conditioner,
    "AA9V2LM00": C.home_air_conditioner,
    "AA9V23M00": C.home_air_conditioner,
    "AA9V2HM00": C.home_air_conditioner,
    "AA9V2DM00": C.home_air_conditioner,
    "AA1PX1E11": C.home_air_conditioner,
    "AA8GV0E0E": C.home_air_conditioner,
    "AA1P59E11": C.home_air_conditioner,
    "AA8GV1E0E": C.home_air_conditioner,
    "AA1PE1E06": C.home_air_conditioner,
    "AA8HF2E06": C.home_air_conditioner,
    "AA8HF1E06": C.home_air_conditioner,
    "AA1P5GE0H": C.home_air_conditioner,
    "AA7ZD1E0H": C.home_air_conditioner,
    "AA7ZD2E0E": C.home_air_conditioner,
    "AA1P5FE15": C.home_air_conditioner,
    "AA8GV5E15": C.home_air_conditioner,
    "AA94C0E0A": C.home_air_conditioner,
    "AA1PX7E06": C.home_air_conditioner,
    "AA8HF0E06": C.home_air_conditioner,
    "AA9V2BM03": C.home_air_conditioner,
    "AA9V2CM03": C.home_air_conditioner,
    "AA9V2DM03": C.home_air_conditioner,
    "AA9V2EM03": C.home_air_conditioner,
    "AA9V2FM03": C.home_air_conditioner,
    "AA9V2GM03": C.home_air_conditioner,
    "AA9V2HM03": C.home_air_conditioner,
    "AA1PE2E0L": C.home_air_conditioner,
    "AA8HF0E0L": C.home_air_conditioner,
    "AA1P5BE0L": C.home_air_conditioner,
    "AA7ZDBE0L": C.home_air_conditioner,
    "AD0MG1E00": C.home_air_conditioner,
    "AD0ME0E01": C.home_air_conditioner,
    "AD0MF0E03": C.home_air_conditioner,
    "AAAV50E07": C.home_air_conditioner,
    "AAA8D4U07": C.home_air_conditioner,
    "AABQY3Z00": C.home_air_conditioner,
    "AD0P31U00": C.home_air_conditioner,
    "AAC1UDU00": C.home_air_conditioner,
    "AAC1NMU00": C.home_air_conditioner,
    "AD0P21U00": C.home_air_conditioner,
    "TD0047781": C.home_air_conditioner,
    "AAC1NQU00": C.home_air_conditioner,
    "AAC1UHE01": C.home_air_conditioner,
    "AAC5P2E01": C.home_air_conditioner,
    "AACH43E00": C.home_air_conditioner,
    "AACDP2E00": C.home_air_conditioner,
    "AAC5QCE00": C.home_air_conditioner,
    "AAC5QDE00": C.home_air_conditioner,
    "AAC1XNE00": C.home_air_conditioner,
    "AAC5P3E01": C.home_air_conditioner,
    "AAC5P4E01": C.home_air_conditioner,
    "AABF1FU01": C.home_air_conditioner,
    "AABF1GU01": C.home_air_conditioner,
    "AABF1LU01": C.home_air_conditioner,
    "AD0P22U00": C.home_air_conditioner,
    "AABUQHU00": C.home_air_conditioner,
    "AD0P33U00": C.home_air_conditioner,
    "AD0P83U00": C.home_air_conditioner,
    "AAAEJ1U07": C.home_air_conditioner,
    "AABT71U00": C.home_air_conditioner,
    "AABT70E00": C.home_air_conditioner,
    "AAC1XTE00": C.home_air_conditioner,
    "AAC1UQE01": C.home_air_conditioner,
    "AAC1TXE01": C.home_air_conditioner,
    "AAC1PBE02": C.home_air_conditioner,
    "AAC1R8E01": C.home_air_conditioner,
    "AAC1W3E01": C.home_air_conditioner,
    "AAC5QEE00": C.home_air_conditioner,
    "TD0013993": C.home_air_conditioner,
    "AA9X51E16": C.home_air_conditioner,
    "AD0KH5U00": C.home_air_conditioner,
    "AAA2GME0B": C.home_air_conditioner,

    # ==================== COMMERCIAL AC ====================
    "AA8X40E4U": C.commercial_ac,
    "AA8XD0E4U": C.commercial_ac,
    "AA99T0E4U": C.commercial_ac,
    "AA9AQ0E29": C.commercial_ac,
    "AA8LF0E5W": C.commercial_ac,
    "AA8XJ0E4U": C.commercial_ac,
    "AA8MR0E5W": C.commercial_ac,
    "AZ0Q90E04": C.commercial_ac,
    "AA9ZG1E29": C.commercial_ac,
    "AZ0Y30E01": C.commercial_ac,
    "AA9AE0E29": C.commercial_ac,
    "AA9AF0E29": C.commercial_ac,
    "AA9AR0E29": C.commercial_ac,
    "AA9AN0E29": C.commercial_ac,
    "AA9AQ1E29": C.commercial_ac,
    "AA0742E29": C.commercial_ac,
    "AA0741E29": C.commercial_ac,
    "AA30RTE00": C.commercial_ac,
    "AA9VKSE00": C.commercial_ac,
    "AABE8EE00": C.commercial_ac,
    "AABEBFE00": C.commercial_ac,
    "AABEBGE00": C.commercial_ac,
    "AAA2K1E4U": C.commercial_ac,
    "AAA2H6E4U": C.commercial_ac,
    "AAA2HFE4U": C.commercial_ac,
    "AZ0Y40E01": C.commercial_ac,
    "AZ0Y50E01": C.commercial_ac,
    "AA0YR1E29": C.commercial_ac,
    "AA9BC2E00": C.commercial_ac,
    "AA8Y55E00": C.commercial_ac,
    "AA8VE0E01": C.commercial_ac,
    "AE1XH0E00": C.commercial_ac,
    "AZ0Q90E02": C.commercial_ac,
    "AA0K11E29": C.commercial_ac,
    "AA8ZC0E5W": C.commercial_ac,
    "AA8Z81E5W": C.commercial_ac,
    "AA8X00E29": C.commercial_ac,
    "AA8XD0E29": C.commercial_ac,
    "AA9530E29": C.commercial_ac,
    "AA8TB0E29": C.commercial_ac,
    "AA8SJ2E4M": C.commercial_ac,
    "AA8SG1E4M": C.commercial_ac,
    "AC2SZ0E07": C.commercial_ac,
    "AA8WT0E5W": C.commercial_ac,
    "AA8RX0E5W": C.commercial_ac,
    "AC39C0E02": C.commercial_ac,
    "AA3MV0E29": C.commercial_ac,
    "AA3MU0E29": C.commercial_ac,
    "AA3MT0E29": C.commercial_ac,
    "AA3MR0E29": C.commercial_ac,
    "AZ0Q60E02": C.commercial_ac,
    "AC3990E02": C.commercial_ac,
    "AC3980E02": C.commercial_ac,
    "AC3970E02": C.commercial_ac,
    "AC3960E02": C.commercial_ac,
    "AC3950E02": C.commercial_ac,
    "AC3940E02": C.commercial_ac,
    "AC2V40E02": C.commercial_ac,
    "AC25Z0E03": C.commercial_ac,
    "AZ0KV0E02": C.commercial_ac,
    "AC2B60E03": C.commercial_ac,
    "AC2140E03": C.commercial_ac,
    "AC2150E05": C.commercial_ac,
    "AC2160E03": C.commercial_ac,
    "AC2170E03": C.commercial_ac,
    "AZ0LL0E12": C.commercial_ac,
    "AC2060E06": C.commercial_ac,
    "AC2070E06": C.commercial_ac,
    "AC25V0E03": C.commercial_ac,
    "AC25W0E03": C.commercial_ac,
    "AC25X0E03": C.commercial_ac,
    "AC25N0E05": C.commercial_ac,
    "AC25P0E04": C.commercial_ac,
    "AC25Q0E04": C.commercial_ac,
    "AC25R0E04": C.commercial_ac,
    "AC25S0E05": C.commercial_ac,
    "AC2090E07": C.commercial_ac,
    "AC20A0E0A": C.commercial_ac,
    "AC20B0E09": C.commercial_ac,
    "AC25T0E02": C.commercial_ac,
    "AC2C50E02": C.commercial_ac,
    "AZ0XT0E02": C.commercial_ac,
    "AZ0Y60E01": C.commercial_ac,
    "AC28Z0E04": C.commercial_ac,
    "AC2900E04": C.commercial_ac,
    "AC2930E04": C.commercial_ac,
    "AC2940E04": C.commercial_ac,
    "AC2940E02": C.commercial_ac,
    "AC28Z0E02": C.commercial_ac,
    "AC2900E02": C.commercial_ac,
    "AC2910E02": C.commercial_ac,
    "AC2920E02": C.commercial_ac,
    "AC2930E02": C.commercial_ac,
    "AZ0Z00E01": C.commercial_ac,
    "AZ0Z10E01": C.commercial_ac,
    "AC25T0E03": C.commercial_ac,
    "AA8RX0E02": C.commercial_ac,
    "AA8S40E02": C.commercial_ac,
    "AA8S30E02": C.commercial_ac,
    "AC2UE0E03": C.commercial_ac,
    "AC2UB0E03": C.commercial_ac,
    "AC2UA0E03": C.commercial_ac,
    "AA8WU0E02": C.commercial_ac,
    "AA8WY0E02": C.commercial_ac,
    "AA8WM0E02": C.commercial_ac,
    "AA8X40E02": C.commercial_ac,
    "AC3980E05": C.commercial_ac,
    "AZ0LL0E18": C.commercial_ac,
    "AA8VE5E2T": C.commercial_ac,
    "AA8WN0E02": C.commercial_ac,
    "AA8WW0E02": C.commercial_ac,
    "AA8WT3E2R": C.commercial_ac,
    "AC3050E02": C.commercial_ac,
    "AA8X40E5W": C.commercial_ac,
    "AA8TC0E29": C.commercial_ac,
    "AA8WY0E5W": C.commercial_ac,
    "AA8WU0E5W": C.commercial_ac,
    "AA8WN0E5W": C.commercial_ac,
    "AA8SM0E29": C.commercial_ac,
    "AE1EW1M00": C.commercial_ac,
    "AA0K10E29": C.commercial_ac,
    "AA9831E29": C.commercial_ac,
    "AA9CR2E5U": C.commercial_ac,
    "AA0Z03E29": C.commercial_ac,
    "AA8SG0E23": C.commercial_ac,
    "AA8SJ0E23": C.commercial_ac,
    "AA10H0E29": C.commercial_ac,
    "AA10H0E4M": C.commercial_ac,
    "AA20B1E4U": C.commercial_ac,
    "AA9XW0E4U": C.commercial_ac,
    "AA0YB0E4U": C.commercial_ac,
    "AAA2H2E4U": C.commercial_ac,
    "AA99U1E4U": C.commercial_ac,
    "AA8VE0E4U": C.commercial_ac,
    "AA8X00E4U": C.commercial_ac,
    "AA9530E4U": C.commercial_ac,
    "AA8WL0E4U": C.commercial_ac,
    "AA8WZ2E2R": C.commercial_ac,
    "AA9AD0E4U": C.commercial_ac,
    "AA9FW2E4U": C.commercial_ac,
    "AA9LC0E4U": C.commercial_ac,
    "AA9AC0E4U": C.commercial_ac,
    "AA9760E29": C.commercial_ac,
    "AA9GQ5E29": C.commercial_ac,
    "AA9AG0E4U": C.commercial_ac,
    "AA9AG5E4U": C.commercial_ac,
    "AA9WF0E29": C.commercial_ac,
    "AA9AG9E4U": C.commercial_ac,
    "AAA1W3E4U": C.commercial_ac,
    "AAA2J0E29": C.commercial_ac,
    "AA2SX0E29": C.commercial_ac,
    "AA9AG2E4U": C.commercial_ac,
    "AA9AG3E4U": C.commercial_ac,
    "AAA2H3E4U": C.commercial_ac,
    "AA9ZU0E29": C.commercial_ac,
    "AA9762E29": C.commercial_ac,
    "AA8WM0E5W": C.commercial_ac,
    "AA9530E5W": C.commercial_ac,
    "AA8S40E5W": C.commercial_ac,
    "AA3MS0E29": C.commercial_ac,
    "AA5Z70E00": C.commercial_ac,
    "AA3160E29": C.commercial_ac,
    "AACAJPE00": C.commercial_ac,
    "AE1QC8E00": C.commercial_ac,
    "AE1WKDE00": C.commercial_ac,
    "AE1WLHE00": C.commercial_ac,
    "AE1XL2E00": C.commercial_ac,
    "AA9ZGNE00": C.commercial_ac,
    "AE1WP4E00": C.commercial_ac,
    "AE1EW0M00": C.commercial_ac,
    "AE1W82E00": C.commercial_ac,
    "AE1WKEE00": C.commercial_ac,
    "AE1WP5E00": C.commercial_ac,
    "AE1UARE01": C.commercial_ac,
    "AE1WP9E00": C.commercial_ac,
    "AA5Z77E00": C.commercial_ac,
    "AE1T08E00": C.commercial_ac,
    "AA39TXE00": C.commercial_ac,
    "AE1T07E00": C.commercial_ac,
    "AA8ZV8E00": C.commercial_ac,
    "AA39T1E01": C.commercial_ac,
    "AA39TRE00": C.commercial_ac,
    "AA39TZE00": C.commercial_ac,
    "AABER0E00": C.commercial_ac,
    "AA0YBHE00": C.commercial_ac,
    "AA976TE00": C.commercial_ac,
    "AA9ZGBE00": C.commercial_ac,
    "AE1T05E00": C.commercial_ac,
    "AE1T04E00": C.commercial_ac,
    "AABE72E01": C.commercial_ac,
    "AABE4BE00": C.commercial_ac,
    "AABE3VE00": C.commercial_ac,
    "AABE5DE00": C.commercial_ac,
    "AC39A0E02": C.commercial_ac,
    "AC39B0E02": C.commercial_ac,
    "AA9VKXE00": C.commercial_ac,
    "AA8XJ1E29": C.commercial_ac,

    # ==================== COMMERCIAL WASHER ====================
    "CEACN0E00": C.commercial_washer,
    "CEACE0E00": C.commercial_washer,
    "CF0J40E00": C.commercial_washer,

    # ==================== TV ====================
    "DH1U6BD00": C.tv,
    "DH1U6PD01": C.tv,
    "DH1U6ND02": C.tv,
    "FA08GCM00": C.tv,

    # ==================== DRUM WASHING MACHINE ====================
    "CF0HV7E00": C.drum_washing_machine,
    "CEAB9HE00": C.drum_washing_machine,
    "CF05Y7E0H": C.drum_washing_machine,
    "CE0J9HE0G": C.drum_washing_machine,
    "CE0JKNE00": C.drum_washing_machine,
    "CE0JYCE0H": C.drum_washing_machine,
    "CE0JWYE0H": C.drum_washing_machine,
    "CEAAJHE0H": C.drum_washing_machine,
    "CE0JWWE0G": C.drum_washing_machine,
    "CE0JGME00": C.drum_washing_machine,
    "CEAAJYE1N": C.drum_washing_machine,
    "CEAAJBE06": C.drum_washing_machine,
    "CE0JKAE1F": C.drum_washing_machine,
    "CEABXJ002": C.drum_washing_machine,
    "CEAB9EZ00": C.drum_washing_machine,
    "CEABF1M00": C.drum_washing_machine,
    "CEABXG002": C.drum_washing_machine,
    "CEAAHY01N": C.drum_washing_machine,
    "CEAC9DE00": C.drum_washing_machine,
    "CEAA37E00": C.drum_washing_machine,
    "CE0JKD01N": C.drum_washing_machine,
    "CE0JWLE01": C.drum_washing_machine,

    # ==================== WASHING MACHINE ====================
    "CAABT5M01": C.washing_machine,
    "CAABT7M00": C.washing_machine,
    "CAABT2M01": C.washing_machine,
    "CAAC6AE00": C.washing_machine,
    "CBAMZH00001W1R8F0132": C.washing_machine,
    "CBAL8UE00": C.washing_machine,

    # ==================== SMALL APPLIANCES ====================
    "TD0027283": C.small_appliances,
    "F705V5M02": C.small_appliances,
    "F705V6M02": C.small_appliances,
    "F705V7M02": C.small_appliances,
    "F705V8M02": C.small_appliances,
    "TD0017818": C.small_appliances,
    "TD0017819": C.small_appliances,
    "TD0017820": C.small_appliances,
    "TD0017823": C.small_appliances,
    "TD0017822": C.small_appliances,
    "TD0017826": C.small_appliances,
    "F705V9M02": C.small_appliances,
    "FP00J9M00": C.small_appliances,
    "F705VAM02": C.small_appliances,
    "F705VBM02": C.small_appliances,
    "FX50Z1M00": C.small_appliances,
    "FX50Z0M00": C.small_appliances,
    "FP00J8M00": C.small_appliances,

    # ==================== COOKTOP ====================
    "FB28UQM00": C.cooktop,
    "FB28UPM00": C.cooktop,
    "FB28URM00": C.cooktop,
    "TD0027815": C.cooktop,
    "FB28UNM00": C.cooktop,

    # ==================== COOKER ====================
    "TD0041312": C.cooker,
    "FY01KJM01": C.cooker,
    "TD0038391": C.cooker,
    "TD0038855": C.cooker,
    "FY01KCM01": C.cooker,
    "TD0025710": C.cooker,
    "TD0031890": C.cooker,
    "TD0037147": C.cooker,
    "TD0038392": C.cooker,
    "TD0038854": C.cooker,
    "TD0035664": C.cooker,
    "TD0031891": C.cooker,
    "TD0027816": C.cooker,
    "TD0039389": C.cooker,
    "TD0042656": C.cooker,
    "TD0039388": C.cooker,
    "TD0032570": C.cooker,
    "TD0042657": C.cooker,
    "FY01KGM01": C.cooker,
    "TD0035663": C.cooker,
    "TD0030850": C.cooker,
    "FY01KFM01": C.cooker,
    "TD0041954": C.cooker,
    "TD0042659": C.cooker,
    "TD0042658": C.cooker,
    "FY01KDM01": C.cooker,
    "FY01KEM01": C.cooker,
    "FY01KHM01": C.cooker,
    "FY01KKM01": C.cooker,
    "FY01KLM01": C.cooker,
    "TD0041313": C.cooker,
    "TD0051709": C.cooker,
    "TD0051708": C.cooker,

    # ==================== RANGE HOOD ====================
    "TD0026191": C.range_hood,
    "TD0026189": C.range_hood,
    "TD0032571": C.range_hood,
    "TD0038390": C.range_hood,
    "TD0041953": C.range_hood,
    "TD0038853": C.range_hood,

    # ==================== WATER HEATER ====================
    "GA0T2JM00": C.water_heater,
    "GA0T2HM00": C.water_heater,
    "GA0T2LM00": C.water_heater,
    "GA0T2FM00": C.water_heater,
    "GA0T2GM00": C.water_heater,
    "GA0T2KM00": C.water_heater,

    # ==================== MICRO-WAVE OVEN ====================
    "GB0E3CM03": C.microwave_oven,
    "GX0153M00": C.microwave_oven,
    "GX0151M00": C.microwave_oven,
    "GX0150M00": C.microwave_oven,
    "GX0152M00": C.microwave_oven,
    "GX0154M00": C.microwave_oven,

    # ==================== OTHERS ====================
    "TD0039934": C.others,
    "TD0037325": C.others,
    "TD0039721": C.others,
    "TD0039754": C.others,
    "TD0039755": C.others,
    "TD0039720": C.others,
    "TD0039717": C.others,
    "TD0039722": C.others,
    "TD0040353": C.others,
    "TD0039756": C.others,
    "TD0040355": C.others,
    "TD0040354": C.others,
    "TD0037212": C.others,
    "TD0039718": C.others,
    "TD0040356": C.others,
    "TD0039719": C.others,
    "TD0036871": C.others,
    "TD0036874": C.others,
    "TD0039715": C.others,
    "TD0036875": C.others,
    "TD0039716": C.others,
    "TD0039394": C.others,
    "TD0039396": C.others,
    "TD0036876": C.others,
    "TD0039993": C.others,
    "TD0036870": C.others,
    "TD0036872": C.others,
    "TD0039395": C.others,
    "TD0039757": C.others,
    "TD0039758": C.others,
    "TD0039397": C.others,
    "TD0039994": C.others,
    "TD0036873": C.others,
    "TD0040358": C.others,
    "TD0040359": C.others,
    "TD0040362": C.others,
    "TD0040361": C.others,
    "TD0040364": C.others,
    "TD0040357": C.others,
    "TD0040365": C.others,
    "TD0040366": C.others,
    "TD0040363": C.others,
    "TD0040368": C.others,
    "TD0040367": C.others,
    "TD0040352": C.others,
    "TD0040360": C.others,
    "F10046M00": C.others,
    "LUMINARC": C.others,
    "JBL FLIP": C.others,
    "FA08GEM00": C.others,
    "AAAV40U13": C.others,
    "AA93Z4U07": C.others,
    "AA9CY2U0N": C.others,
}

EXACT_MATCH_TABLE: Mapping[str, C] = MappingProxyType(_EXACT_CODES)
