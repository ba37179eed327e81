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

from re                  import compile as rc
from rsclib.iter_recipes import grouper

class Maidenhead_Locator (object) :
    """ Position given by a GRID-LOCATOR header line.
        Cabrillo allows a square (4 characters) or a subsquare (6
        characters), the position is the middle of that area.
    >>> cls = Maidenhead_Locator
    >>> cls.is_valid ('FN20ib'), cls.is_valid ('ar34id')
    (True, True)
    >>> cls.is_valid ('Az99xx'), cls.is_valid ('asdf')
    (False, False)
    >>> cls.is_valid ('FN20id00xx')
    False
    >>> loc = cls.from_locator ('JN88')
    >>> loc
    48°28'37.16"N 16°57'14.33"E
    >>> loc = cls.from_locator ('JN88ef')
    >>> print ("(%2.5f, %2.5f)" % (loc.lat, loc.lon))
    (48.22821, 16.37308)
    >>> cls.from_locator ('JN88', round_vhf = False)
    48°30'0.00"N 17°0'0.00"E
    """

    re_locator = rc (r'^[A-Ra-r]{2}[0-9]{2}([A-Xa-x]{2})?$')

    def __init__ (self, lat, lon) :
        self.lat = lat
        self.lon = lon
    # end def __init__

    @classmethod
    def is_valid (cls, loc) :
        return bool (cls.re_locator.match (loc))
    # end def is_valid

    @classmethod
    def from_locator (cls, loc, round_vhf = True) :
        """ Alternating letter and digit pairs, each pair refines the
            previous one by 24 (letters) or 10 (digits) steps; the
            first pair has 18 letters of 20 degrees longitude and 10
            degrees latitude.
            See VHF Handbook V 8.5
            https://www.iaru-r1.org/index.php/downloads/func-startdown/1018/
            for the rounding constant: the middle of a square is found
            by appending 'LL' or '44' which is slightly below 0.5.
        """
        rounding_constant = 0.47699
        if not round_vhf :
            rounding_constant = .5
        lon = lat = 0.0
        mul = 10
        for n, (x, y) in enumerate (grouper (2, loc)) :
            if n % 2 :
                lon   += int (x) * mul
                lat   += int (y) * mul
                steps  = 24
            else :
                lon   += (ord (x.upper ()) - ord ('A')) * mul
                lat   += (ord (y.upper ()) - ord ('A')) * mul
                steps  = 10
            mul = mul / steps
        lon += mul * steps * rounding_constant
        lat += mul * steps * rounding_constant
        return cls (lat = lat - 90, lon = lon * 2 - 180)
    # end def from_locator

    def _format (self, value, suffices) :
        r      = []
        suffix = suffices [value > 0]
        value  = abs (value)
        r.append (int (value))
        r.append ('°')
        for s in ("'", '"') :
            value -= int (value)
            value *= 60
            if s == '"' :
                r.append ("%2.2f" % value)
            else :
                r.append (int (value))
            r.append (s)
        r.append (suffix)
        return ''.join (str (x) for x in r)
    # end def _format

    def __str__ (self) :
        return ' '.join \
            (self._format (v, s) for v, s in ((self.lat, 'SN'), (self.lon, 'WE')))
    # end def __str__
    __repr__ = __str__

# end class Maidenhead_Locator
