"""Per-year lunar data table.

Each supported year has a LunarYearRecord (month lengths and leap month) and a
new-year offset: the number of days of the solar year that precede Tết.
Both tables are dense tuples indexed by ``year - FIRST_TABLE_YEAR``.

The tables below are generated by ``lunar_astronomy.render_table`` at UTC+7;
do not edit them by hand.
"""

from ._types import DEFAULT_CONFIG, LunarYearRecord
from .errors import OutOfRangeError

MIN_YEAR = DEFAULT_CONFIG.min_year
MAX_YEAR = DEFAULT_CONFIG.max_year
# Dates in January before Tết of MIN_YEAR belong to lunar year MIN_YEAR - 1.
FIRST_TABLE_YEAR = MIN_YEAR - 1

LUNAR_YEARS: tuple[LunarYearRecord, ...] = (
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30), 0),  # 1899
    LunarYearRecord(8, (29, 30, 29, 29, 30, 29, 30, 30, 30, 30, 29, 30), 29),  # 1900
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30, 29), 0),  # 1901
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 29), 0),  # 1902
    LunarYearRecord(5, (30, 30, 29, 30, 29, 30, 29, 29, 30, 30, 29, 30), 29),  # 1903
    LunarYearRecord(0, (30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 29), 0),  # 1904
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 29, 30, 29, 29, 30, 30), 0),  # 1905
    LunarYearRecord(4, (29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30), 30),  # 1906
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 1907
    LunarYearRecord(0, (30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29, 30), 0),  # 1908
    LunarYearRecord(2, (29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29, 30), 29),  # 1909
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 29, 30), 0),  # 1910
    LunarYearRecord(6, (30, 29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30), 29),  # 1911
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 29, 30), 0),  # 1912
    LunarYearRecord(0, (30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 29, 30), 0),  # 1913
    LunarYearRecord(5, (30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 29, 30), 30),  # 1914
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 29), 0),  # 1915
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 1916
    LunarYearRecord(3, (30, 29, 29, 29, 30, 30, 29, 30, 30, 29, 30, 29), 30),  # 1917
    LunarYearRecord(0, (30, 29, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30), 0),  # 1918
    LunarYearRecord(7, (29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30), 30),  # 1919
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30), 0),  # 1920
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30), 0),  # 1921
    LunarYearRecord(6, (30, 29, 30, 30, 29, 29, 29, 29, 30, 29, 30, 30), 30),  # 1922
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 1923
    LunarYearRecord(0, (29, 30, 30, 29, 30, 30, 29, 30, 29, 30, 29, 29), 0),  # 1924
    LunarYearRecord(4, (30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30), 30),  # 1925
    LunarYearRecord(0, (29, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29), 0),  # 1926
    LunarYearRecord(0, (30, 29, 29, 30, 29, 30, 29, 30, 29, 30, 30, 30), 0),  # 1927
    LunarYearRecord(2, (29, 30, 29, 30, 29, 29, 30, 29, 30, 30, 30, 30), 29),  # 1928
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30), 0),  # 1929
    LunarYearRecord(6, (29, 30, 30, 29, 29, 30, 29, 30, 29, 30, 30, 29), 29),  # 1930
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29), 0),  # 1931
    LunarYearRecord(0, (30, 30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 1932
    LunarYearRecord(5, (29, 30, 30, 29, 30, 30, 30, 29, 29, 30, 29, 30), 29),  # 1933
    LunarYearRecord(0, (29, 30, 29, 30, 30, 29, 30, 29, 30, 30, 29, 29), 0),  # 1934
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29), 0),  # 1935
    LunarYearRecord(3, (30, 29, 29, 29, 29, 30, 30, 29, 30, 30, 29, 30), 30),  # 1936
    LunarYearRecord(0, (30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29), 0),  # 1937
    LunarYearRecord(8, (30, 30, 29, 29, 30, 29, 29, 30, 30, 30, 29, 30), 29),  # 1938
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 1939
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29), 0),  # 1940
    LunarYearRecord(6, (30, 30, 29, 30, 30, 29, 29, 29, 30, 29, 30, 29), 30),  # 1941
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30), 0),  # 1942
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 1943
    LunarYearRecord(4, (30, 29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30), 30),  # 1944
    LunarYearRecord(0, (29, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29, 30), 0),  # 1945
    LunarYearRecord(0, (30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 29, 30), 0),  # 1946
    LunarYearRecord(2, (30, 29, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30), 30),  # 1947
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 1948
    LunarYearRecord(7, (30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30), 29),  # 1949
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29), 0),  # 1950
    LunarYearRecord(0, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30), 0),  # 1951
    LunarYearRecord(5, (29, 30, 29, 30, 29, 29, 30, 30, 29, 30, 29, 30), 30),  # 1952
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 30, 30, 29, 30, 29), 0),  # 1953
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30), 0),  # 1954
    LunarYearRecord(3, (29, 30, 29, 29, 29, 30, 29, 30, 29, 30, 30, 30), 30),  # 1955
    LunarYearRecord(0, (29, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 30), 0),  # 1956
    LunarYearRecord(8, (29, 30, 30, 29, 30, 29, 29, 30, 29, 30, 30, 29), 29),  # 1957
    LunarYearRecord(0, (30, 30, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 1958
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29), 0),  # 1959
    LunarYearRecord(6, (30, 29, 30, 29, 30, 30, 30, 29, 30, 29, 30, 29), 29),  # 1960
    LunarYearRecord(0, (30, 29, 29, 30, 30, 29, 30, 30, 29, 30, 29, 30), 0),  # 1961
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29), 0),  # 1962
    LunarYearRecord(4, (30, 29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29), 29),  # 1963
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 30, 29), 0),  # 1964
    LunarYearRecord(0, (30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 29), 0),  # 1965
    LunarYearRecord(3, (30, 30, 30, 30, 29, 29, 30, 29, 29, 30, 30, 29), 29),  # 1966
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 29, 30, 29, 29, 30, 29), 0),  # 1967
    LunarYearRecord(7, (30, 30, 29, 30, 30, 29, 30, 30, 29, 30, 29, 29), 29),  # 1968
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 1969
    LunarYearRecord(0, (30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29, 30), 0),  # 1970
    LunarYearRecord(5, (29, 30, 29, 29, 30, 30, 29, 30, 30, 30, 29, 30), 29),  # 1971
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 29, 30), 0),  # 1972
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 29, 30), 0),  # 1973
    LunarYearRecord(4, (30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 30), 29),  # 1974
    LunarYearRecord(0, (30, 29, 30, 30, 29, 29, 30, 29, 29, 30, 29, 30), 0),  # 1975
    LunarYearRecord(8, (30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30), 29),  # 1976
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 29), 0),  # 1977
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 30, 29, 30, 29), 0),  # 1978
    LunarYearRecord(6, (29, 30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 29), 30),  # 1979
    LunarYearRecord(0, (30, 29, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30), 0),  # 1980
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 29, 30, 30, 29, 30, 30), 0),  # 1981
    LunarYearRecord(4, (30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 30, 30), 29),  # 1982
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30), 0),  # 1983
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 1984
    LunarYearRecord(2, (30, 29, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 30),  # 1985
    LunarYearRecord(0, (29, 30, 30, 29, 30, 30, 29, 30, 29, 29, 30, 29), 0),  # 1986
    LunarYearRecord(7, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 29), 30),  # 1987
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29), 0),  # 1988
    LunarYearRecord(0, (30, 29, 29, 30, 29, 29, 30, 30, 29, 30, 30, 30), 0),  # 1989
    LunarYearRecord(5, (29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30, 30), 29),  # 1990
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30), 0),  # 1991
    LunarYearRecord(0, (29, 30, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30), 0),  # 1992
    LunarYearRecord(3, (29, 30, 30, 30, 29, 30, 29, 29, 30, 29, 30, 29), 29),  # 1993
    LunarYearRecord(0, (30, 30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 1994
    LunarYearRecord(8, (29, 30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 30),  # 1995
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 1996
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 29, 30, 30, 29, 30), 0),  # 1997
    LunarYearRecord(5, (30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29, 30), 29),  # 1998
    LunarYearRecord(0, (30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29), 0),  # 1999
    LunarYearRecord(0, (30, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 29), 0),  # 2000
    LunarYearRecord(4, (30, 30, 29, 30, 30, 29, 29, 30, 29, 30, 29, 30), 29),  # 2001
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29), 0),  # 2002
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 2003
    LunarYearRecord(2, (29, 30, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30), 29),  # 2004
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 2005
    LunarYearRecord(7, (30, 29, 30, 29, 29, 30, 30, 30, 30, 29, 30, 29), 29),  # 2006
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29, 30), 0),  # 2007
    LunarYearRecord(0, (30, 29, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30), 0),  # 2008
    LunarYearRecord(5, (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 30), 29),  # 2009
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 2010
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 29, 30, 29, 30, 29), 0),  # 2011
    LunarYearRecord(4, (30, 29, 30, 30, 30, 29, 30, 29, 30, 29, 30, 29), 29),  # 2012
    LunarYearRecord(0, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30), 0),  # 2013
    LunarYearRecord(9, (29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29, 30), 29),  # 2014
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 30, 30, 29, 30, 29), 0),  # 2015
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30), 0),  # 2016
    LunarYearRecord(6, (29, 30, 29, 30, 29, 29, 29, 30, 29, 30, 30, 30), 30),  # 2017
    LunarYearRecord(0, (29, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 30), 0),  # 2018
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30), 0),  # 2019
    LunarYearRecord(4, (29, 30, 30, 30, 30, 29, 29, 30, 29, 29, 30, 30), 29),  # 2020
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29), 0),  # 2021
    LunarYearRecord(0, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30), 0),  # 2022
    LunarYearRecord(2, (29, 30, 29, 30, 30, 29, 30, 30, 29, 30, 29, 30), 29),  # 2023
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29), 0),  # 2024
    LunarYearRecord(6, (30, 29, 30, 29, 29, 30, 30, 29, 30, 30, 30, 29), 29),  # 2025
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 30, 29), 0),  # 2026
    LunarYearRecord(0, (30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 29), 0),  # 2027
    LunarYearRecord(5, (30, 30, 30, 29, 30, 29, 30, 29, 29, 30, 30, 29), 29),  # 2028
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 29, 30, 29, 29, 30, 29), 0),  # 2029
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29), 0),  # 2030
    LunarYearRecord(3, (29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 30),  # 2031
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29, 30), 0),  # 2032
    LunarYearRecord(11, (29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30, 30), 29),  # 2033
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 29, 30, 30, 30, 29, 30), 0),  # 2034
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 30, 29, 30), 0),  # 2035
    LunarYearRecord(6, (30, 30, 29, 30, 29, 29, 29, 29, 30, 29, 30, 30), 30),  # 2036
    LunarYearRecord(0, (30, 29, 30, 30, 29, 29, 30, 29, 29, 30, 29, 30), 0),  # 2037
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 29, 29, 30, 29), 0),  # 2038
    LunarYearRecord(5, (30, 30, 29, 30, 30, 30, 29, 30, 29, 29, 30, 29), 29),  # 2039
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 30, 29, 30, 29), 0),  # 2040
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29, 30), 0),  # 2041
    LunarYearRecord(2, (29, 30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30), 29),  # 2042
    LunarYearRecord(0, (29, 30, 29, 29, 30, 29, 29, 30, 30, 29, 30, 30), 0),  # 2043
    LunarYearRecord(7, (30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30), 29),  # 2044
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30), 0),  # 2045
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 2046
    LunarYearRecord(5, (30, 29, 30, 30, 29, 29, 30, 29, 29, 30, 29, 30), 30),  # 2047
    LunarYearRecord(0, (29, 30, 30, 29, 30, 30, 29, 30, 29, 29, 30, 29), 0),  # 2048
    LunarYearRecord(0, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 30, 29), 0),  # 2049
    LunarYearRecord(3, (29, 30, 29, 29, 30, 29, 30, 30, 29, 30, 30, 29), 30),  # 2050
    LunarYearRecord(0, (29, 30, 29, 30, 29, 29, 30, 30, 29, 30, 30, 30), 0),  # 2051
    LunarYearRecord(8, (29, 30, 29, 29, 30, 29, 29, 30, 30, 30, 30, 29), 29),  # 2052
    LunarYearRecord(0, (30, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 30), 0),  # 2053
    LunarYearRecord(0, (29, 30, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30), 0),  # 2054
    LunarYearRecord(6, (29, 30, 30, 29, 30, 29, 29, 29, 30, 29, 30, 29), 30),  # 2055
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 30, 29, 29, 30, 29, 30), 0),  # 2056
    LunarYearRecord(0, (29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29), 0),  # 2057
    LunarYearRecord(4, (30, 29, 30, 29, 29, 30, 30, 29, 30, 29, 30, 29), 30),  # 2058
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 30, 29, 30, 30, 29, 30), 0),  # 2059
    LunarYearRecord(0, (29, 30, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29), 0),  # 2060
    LunarYearRecord(3, (30, 30, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29), 29),  # 2061
    LunarYearRecord(0, (30, 30, 29, 29, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 2062
    LunarYearRecord(7, (30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30), 29),  # 2063
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29), 0),  # 2064
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 2065
    LunarYearRecord(5, (29, 30, 29, 30, 30, 30, 29, 30, 29, 30, 29, 30), 29),  # 2066
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29), 0),  # 2067
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 30, 29, 30, 30, 29, 30), 0),  # 2068
    LunarYearRecord(4, (29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29, 30), 29),  # 2069
    LunarYearRecord(0, (29, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30), 0),  # 2070
    LunarYearRecord(8, (30, 29, 30, 29, 30, 29, 29, 30, 30, 29, 30, 30), 29),  # 2071
    LunarYearRecord(0, (30, 29, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 0),  # 2072
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 29, 30, 29, 29, 30), 0),  # 2073
    LunarYearRecord(6, (30, 29, 30, 30, 29, 30, 30, 29, 30, 29, 30, 29), 29),  # 2074
    LunarYearRecord(0, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30), 0),  # 2075
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 29, 30, 30, 29, 30, 29), 0),  # 2076
    LunarYearRecord(4, (30, 29, 30, 29, 30, 29, 30, 30, 30, 29, 30, 29), 29),  # 2077
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30), 0),  # 2078
    LunarYearRecord(0, (29, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30), 0),  # 2079
    LunarYearRecord(3, (30, 29, 30, 30, 29, 29, 29, 30, 29, 30, 30, 30), 29),  # 2080
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 29, 30, 29, 29, 30, 30), 0),  # 2081
    LunarYearRecord(7, (29, 30, 30, 29, 30, 29, 30, 30, 29, 29, 30, 30), 29),  # 2082
    LunarYearRecord(0, (29, 30, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29), 0),  # 2083
    LunarYearRecord(0, (30, 29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30), 0),  # 2084
    LunarYearRecord(5, (29, 29, 30, 29, 30, 29, 30, 29, 30, 30, 29, 30), 30),  # 2085
    LunarYearRecord(0, (29, 29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29), 0),  # 2086
    LunarYearRecord(0, (30, 29, 30, 29, 29, 30, 29, 30, 29, 30, 30, 30), 0),  # 2087
    LunarYearRecord(4, (29, 30, 29, 30, 29, 29, 30, 29, 30, 30, 30, 29), 29),  # 2088
    LunarYearRecord(0, (30, 30, 29, 30, 29, 29, 29, 30, 29, 30, 30, 29), 0),  # 2089
    LunarYearRecord(8, (30, 30, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 29),  # 2090
    LunarYearRecord(0, (30, 30, 29, 30, 29, 30, 29, 30, 29, 29, 30, 29), 0),  # 2091
    LunarYearRecord(0, (30, 30, 29, 30, 30, 29, 30, 29, 30, 29, 29, 30), 0),  # 2092
    LunarYearRecord(6, (29, 30, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29), 30),  # 2093
    LunarYearRecord(0, (29, 30, 29, 30, 29, 30, 30, 29, 30, 30, 29, 30), 0),  # 2094
    LunarYearRecord(0, (29, 29, 30, 29, 30, 29, 30, 29, 30, 30, 30, 29), 0),  # 2095
    LunarYearRecord(4, (30, 29, 30, 29, 30, 29, 29, 30, 30, 30, 29, 30), 29),  # 2096
    LunarYearRecord(0, (30, 29, 30, 29, 29, 29, 30, 29, 30, 30, 29, 30), 0),  # 2097
    LunarYearRecord(0, (30, 30, 29, 30, 29, 29, 29, 30, 29, 30, 29, 30), 0),  # 2098
    LunarYearRecord(2, (30, 30, 30, 29, 30, 29, 29, 30, 29, 30, 29, 30), 29),  # 2099
    LunarYearRecord(0, (30, 29, 30, 30, 29, 30, 29, 30, 29, 29, 30, 29), 0),  # 2100
)

NEW_YEAR_OFFSETS: tuple[int, ...] = (
    40, 30, 49, 38, 27, 46, 34, 24, 43, 32,  # 1899
    21, 40, 29, 48, 36, 25, 44, 33, 22, 41,  # 1909
    31, 50, 38, 27, 46, 35, 23, 43, 32, 22,  # 1919
    40, 29, 47, 36, 25, 44, 33, 23, 41, 30,  # 1929
    49, 38, 26, 45, 35, 24, 43, 32, 21, 40,  # 1939
    28, 47, 36, 26, 44, 33, 23, 42, 30, 48,  # 1949
    38, 27, 45, 35, 24, 43, 31, 20, 39, 28,  # 1959
    46, 36, 26, 45, 33, 22, 41, 30, 48, 37,  # 1969
    27, 46, 35, 24, 43, 32, 20, 39, 28, 47,  # 1979
    36, 26, 45, 34, 22, 40, 30, 49, 37, 27,  # 1989
    46, 35, 23, 42, 31, 21, 39, 28, 47, 37,  # 1999
    25, 44, 33, 22, 40, 30, 49, 38, 27, 46,  # 2009
    35, 24, 42, 31, 21, 40, 28, 47, 36, 25,  # 2019
    43, 32, 22, 41, 30, 49, 38, 27, 45, 34,  # 2029
    23, 42, 31, 21, 40, 29, 47, 36, 25, 44,  # 2039
    32, 22, 41, 31, 48, 38, 27, 45, 34, 23,  # 2049
    42, 32, 20, 39, 28, 47, 35, 25, 44, 33,  # 2059
    22, 41, 30, 49, 37, 26, 45, 35, 23, 42,  # 2069
    32, 21, 39, 28, 47, 36, 25, 44, 33, 23,  # 2079
    40, 29, 48, 37, 26, 45, 35, 24, 42, 31,  # 2089
    20, 39,  # 2099
)


def _index(year: int) -> int:
    if year < FIRST_TABLE_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"Year {year} is out of supported range ({MIN_YEAR}-{MAX_YEAR})",
            {"year": year},
        )
    return year - FIRST_TABLE_YEAR


def year_record(year: int) -> LunarYearRecord:
    """Lunar year record for the lunar year starting in solar ``year``."""
    return LUNAR_YEARS[_index(year)]


def new_year_offset(year: int) -> int:
    """Days of solar ``year`` that precede Tết."""
    return NEW_YEAR_OFFSETS[_index(year)]


def month_days(record: LunarYearRecord, month: int, is_leap: bool = False) -> int:
    """Length of a month of a lunar year (the leap month when is_leap)."""
    if is_leap:
        return record.leap_days
    return record.month_days[month - 1]


def leap_month(record: LunarYearRecord) -> int:
    """Leap month number (1-12), or 0 for a common year."""
    return record.leap_month


def leap_month_days(record: LunarYearRecord) -> int:
    return record.leap_days


def year_days(record: LunarYearRecord) -> int:
    """Days in the lunar year, leap month included."""
    return record.total_days
