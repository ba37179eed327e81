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

from enum           import Enum
from cabrillo.error import Unknown_Variant

class Cabrillo_Enum (Enum) :
    """ Closed vocabulary of an enumerated Cabrillo value.
        The value of each member is the tuple of spellings accepted for
        it, the first one is the canonical spelling. Lookup ignores
        case, Cabrillo tag values are upper case but not every logging
        program gets that right.
    >>> Power_Category.parse ('qrp')
    <Power_Category.QRP: ('QRP',)>
    >>> Mode.parse ('SSB') is Mode.parse ('PH')
    True
    >>> Mode.RTTY.token
    'RY'
    >>> Power_Category.parse ('MEDIUM', 'CATEGORY-POWER')
    Traceback (most recent call last):
    ...
    cabrillo.error.Unknown_Variant: Invalid value 'MEDIUM' in tag 'CATEGORY-POWER' (unknown variant)
    """

    @classmethod
    def parse (cls, token, tag = None) :
        t = token.strip ().upper ()
        for member in cls :
            if t in member.spellings :
                return member
        raise Unknown_Variant (tag or cls.__name__, token)
    # end def parse

    @property
    def spellings (self) :
        return self.value
    # end def spellings

    @property
    def token (self) :
        return self.value [0]
    # end def token

    def __str__ (self) :
        return self.token
    # end def __str__

# end class Cabrillo_Enum

class Band (Cabrillo_Enum) :
    """ CATEGORY-BAND values. Bands above 30 MHz are written as a band
        designator in QSO lines (e.g. 50, 144, 1.2G), these additional
        spellings are only valid in QSO lines, see
        convert.frequency_cvt.
    >>> Band.parse ('2m')
    <Band.BAND_2M: ('2M', '144')>
    >>> Band.parse ('144', 'CATEGORY-BAND')
    Traceback (most recent call last):
    ...
    cabrillo.error.Unknown_Variant: Invalid value '144' in tag 'CATEGORY-BAND' (unknown variant)
    """
    ALL         = ('ALL',)
    BAND_160M   = ('160M',)
    BAND_80M    = ('80M',)
    BAND_40M    = ('40M',)
    BAND_20M    = ('20M',)
    BAND_15M    = ('15M',)
    BAND_10M    = ('10M',)
    BAND_6M     = ('6M',   '50')
    BAND_4M     = ('4M',   '70')
    BAND_2M     = ('2M',   '144')
    BAND_222    = ('222',)
    BAND_432    = ('432',)
    BAND_902    = ('902',)
    BAND_1_2G   = ('1.2G',)
    BAND_2_3G   = ('2.3G',)
    BAND_3_4G   = ('3.4G',)
    BAND_5_7G   = ('5.7G',)
    BAND_10G    = ('10G',)
    BAND_24G    = ('24G',)
    BAND_47G    = ('47G',)
    BAND_75G    = ('75G',)
    BAND_123G   = ('123G', '122G')
    BAND_134G   = ('134G',)
    BAND_241G   = ('241G',)
    LIGHT       = ('LIGHT',)
    VHF_3_BAND  = ('VHF-3-BAND',)
    VHF_FM_ONLY = ('VHF-FM-ONLY',)

    @property
    def spellings (self) :
        return self.value [:1]
    # end def spellings

    @property
    def is_band (self) :
        """ True for a real amateur band, False for the entry classes
            that span several bands.
        >>> Band.BAND_2M.is_band, Band.ALL.is_band
        (True, False)
        """
        return self not in (Band.ALL, Band.VHF_3_BAND, Band.VHF_FM_ONLY)
    # end def is_band

# end class Band

class Mode (Cabrillo_Enum) :
    """ Used for CATEGORY-MODE and the mode of a QSO line, the QSO line
        uses the two-letter spelling.
    """
    CW      = ('CW',)
    PHONE   = ('PH', 'SSB')
    FM      = ('FM',)
    RTTY    = ('RY', 'RTTY')
    DIGITAL = ('DG', 'DIGI')
    MIXED   = ('MIXED',)
# end class Mode

class Operator_Category (Cabrillo_Enum) :
    SINGLE_OP = ('SINGLE-OP',)
    MULTI_OP  = ('MULTI-OP',)
    CHECKLOG  = ('CHECKLOG',)
# end class Operator_Category

class Power_Category (Cabrillo_Enum) :
    HIGH = ('HIGH',)
    LOW  = ('LOW',)
    QRP  = ('QRP',)
# end class Power_Category

class Station_Category (Cabrillo_Enum) :
    FIXED           = ('FIXED',)
    MOBILE          = ('MOBILE',)
    PORTABLE        = ('PORTABLE',)
    ROVER           = ('ROVER',)
    ROVER_LIMITED   = ('ROVER-LIMITED',)
    ROVER_UNLIMITED = ('ROVER-UNLIMITED',)
    EXPEDITION      = ('EXPEDITION',)
    HQ              = ('HQ',)
    SCHOOL          = ('SCHOOL',)
# end class Station_Category

class Time_Category (Cabrillo_Enum) :
    HOURS_6  = ('6-HOURS',)
    HOURS_12 = ('12-HOURS',)
    HOURS_24 = ('24-HOURS',)
# end class Time_Category

class Transmitter_Category (Cabrillo_Enum) :
    ONE       = ('ONE',)
    TWO       = ('TWO',)
    LIMITED   = ('LIMITED',)
    UNLIMITED = ('UNLIMITED',)
    SWL       = ('SWL',)
# end class Transmitter_Category

class Overlay_Category (Cabrillo_Enum) :
    CLASSIC     = ('CLASSIC',)
    ROOKIE      = ('ROOKIE',)
    TB_WIRES    = ('TB-WIRES',)
    NOVICE_TECH = ('NOVICE-TECH',)
    OVER_50     = ('OVER-50',)
# end class Overlay_Category

__all__ = \
    [ 'Cabrillo_Enum', 'Band', 'Mode', 'Operator_Category', 'Power_Category'
    , 'Station_Category', 'Time_Category', 'Transmitter_Category'
    , 'Overlay_Category'
    ]
