#!/usr/bin/python3
# Copyright (C) 2021 Dr. Ralf Schlatterbeck Open Source Consulting.
# Reichergasse 131, A-3411 Weidling.
# Web: http://www.runtux.com Email: office@runtux.com
# ****************************************************************************
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are
# met:
#
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS
# IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED
# TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A
# PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
# HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
# SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED
# TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR
# PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS
# SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
# ****************************************************************************

import sys
from bisect            import bisect_right
from cabrillo.category import Band

class Band_Range :
    """ Frequency range of a band, frequencies are in kHz as they are
        written in a Cabrillo QSO line.
    """

    def __init__ (self, bandplan, band, f_start, f_end) :
        self.band    = band
        self.f_start = f_start
        self.f_end   = f_end
        self.plan    = bandplan
    # end def __init__

    def __contains__ (self, khz) :
        return self.f_start <= khz <= self.f_end
    # end def __contains__

    def __str__ (self) :
        if self.f_start >= 1e6 :
            range = '%.3f GHz-%.3f GHz' % (self.f_start / 1e6, self.f_end / 1e6)
        elif self.f_start >= 1e3 :
            range = '%.3f MHz-%.3f MHz' % (self.f_start / 1e3, self.f_end / 1e3)
        else :
            range = '%d kHz-%d kHz' % (self.f_start, self.f_end)
        return 'Band %s %s' % (self.band, range)
    # end def __str__
    __repr__ = __str__

    def __lt__ (self, other) :
        return self.f_start < other.f_start
    # end def __lt__

# end class Band_Range

class Overlap_Error (ValueError) :
    """ This is raised if an inserted band overlaps an existing one
    """
    pass

class Bandplan :
    """ Keep track of a set of Band_Range objects for mapping a QSO
        frequency to its contest band.
    >>> contest_bandplan.lookup (14256)
    Band 20M 14.000 MHz-14.350 MHz
    >>> contest_bandplan.lookup (10120) is None
    True
    >>> contest_bandplan.lookup (1800).band.name
    'BAND_160M'
    >>> contest_bandplan.add_band \\
    ...     (Band_Range (contest_bandplan, Band.BAND_40M, 7200, 7400))
    Traceback (most recent call last):
    ...
    cabrillo.bandplan.Overlap_Error: New band Band 40M 7.200 MHz-7.400 MHz overlaps existing Band 40M 7.000 MHz-7.300 MHz
    """

    def __init__ (self) :
        """ This is kept sorted for a little faster lookup
        """
        self.bands = []
    # end def __init__

    def add_band (self, band) :
        idx = bisect_right (self.bands, band)
        for n in idx - 1, idx :
            if 0 <= n < len (self.bands) :
                other = self.bands [n]
                if band.f_start <= other.f_end and other.f_start <= band.f_end :
                    raise Overlap_Error \
                        ('New band %s overlaps existing %s' % (band, other))
        self.bands.insert (idx, band)
    # end def add_band

    def lookup (self, khz) :
        b   = Band_Range (None, None, khz, khz)
        idx = bisect_right (self.bands, b) - 1
        if idx < 0 :
            return None
        entry = self.bands [idx]
        if khz in entry :
            return entry
        return None
    # end def lookup

# end class Bandplan

# Band edges as used by the contest sponsors' log checkers, in kHz.
# Everything from 300 THz upwards counts as LIGHT.
contest_bandplan = cbp = Bandplan ()
cbp.add_band (Band_Range (cbp, Band.BAND_160M,       1800,      2000))
cbp.add_band (Band_Range (cbp, Band.BAND_80M,        3500,      4000))
cbp.add_band (Band_Range (cbp, Band.BAND_40M,        7000,      7300))
cbp.add_band (Band_Range (cbp, Band.BAND_20M,       14000,     14350))
cbp.add_band (Band_Range (cbp, Band.BAND_15M,       21000,     21450))
cbp.add_band (Band_Range (cbp, Band.BAND_10M,       28000,     29700))
cbp.add_band (Band_Range (cbp, Band.BAND_6M,        50000,     54000))
cbp.add_band (Band_Range (cbp, Band.BAND_4M,        70000,     70500))
cbp.add_band (Band_Range (cbp, Band.BAND_2M,       144000,    148000))
cbp.add_band (Band_Range (cbp, Band.BAND_222,      219000,    225000))
cbp.add_band (Band_Range (cbp, Band.BAND_432,      420000,    450000))
cbp.add_band (Band_Range (cbp, Band.BAND_902,      902000,    928000))
cbp.add_band (Band_Range (cbp, Band.BAND_1_2G,    1240000,   1300000))
cbp.add_band (Band_Range (cbp, Band.BAND_2_3G,    2390000,   2450000))
cbp.add_band (Band_Range (cbp, Band.BAND_3_4G,    3300000,   3500000))
cbp.add_band (Band_Range (cbp, Band.BAND_5_7G,    5650000,   5925000))
cbp.add_band (Band_Range (cbp, Band.BAND_10G,    10000000,  10500000))
cbp.add_band (Band_Range (cbp, Band.BAND_24G,    24000000,  24250000))
cbp.add_band (Band_Range (cbp, Band.BAND_47G,    47000000,  47200000))
cbp.add_band (Band_Range (cbp, Band.BAND_75G,    76000000,  81000000))
cbp.add_band (Band_Range (cbp, Band.BAND_123G,  122250000, 123000000))
cbp.add_band (Band_Range (cbp, Band.BAND_134G,  134000000, 141000000))
cbp.add_band (Band_Range (cbp, Band.BAND_241G,  241000000, 250000000))
cbp.add_band (Band_Range (cbp, Band.LIGHT,      300000000, float ('inf')))

__all__ = ['contest_bandplan', 'Band_Range', 'Bandplan', 'Overlap_Error']

if __name__ == '__main__' :
    print (contest_bandplan.lookup (int (sys.argv [1])))
