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

""" Converters for the payload of Cabrillo tags.
    Each converter is called with the stripped payload and the tag (for
    error messages) and returns the typed value or raises
    Conversion_Error.
"""

from re                import compile as rc
from datetime          import datetime
from collections       import namedtuple
from cabrillo.error    import Conversion_Error
from cabrillo.category import Band
from cabrillo.qth      import Maidenhead_Locator

# Fixed-width date and time of QSO and OFFTIME lines
date_format = '%Y-%m-%d %H%M'

re_date     = rc (r'^[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}$')
re_number   = rc (r'^[0-9]+$')
re_version  = rc (r'^[0-9]+(\.[0-9]+)?$')
re_email    = rc \
    (r'^([a-zA-Z0-9_\-\.]+)@([a-zA-Z0-9_\-\.]+)\.([a-zA-Z]{2,5})$')
re_operator = rc (r'[\s,]+')

max_int     = 2 ** 32 - 1

class Offtime (namedtuple ('Offtime', 'begin end')) :
    """ Time range during which the station was not operating """
    __slots__ = ()
# end class Offtime

def text_cvt (value, tag = None) :
    return value.strip ()
# end def text_cvt

def bool_cvt (value, tag = None, true = 'YES', false = 'NO') :
    """
    >>> bool_cvt ('YES'), bool_cvt ('no')
    (True, False)
    >>> bool_cvt ('maybe', 'CERTIFICATE')
    Traceback (most recent call last):
    ...
    cabrillo.error.Conversion_Error: Invalid value 'maybe' in tag 'CERTIFICATE' (expected YES or NO)
    """
    v = value.strip ().upper ()
    if v == true :
        return True
    if v == false :
        return False
    raise Conversion_Error (tag, value, 'expected %s or %s' % (true, false))
# end def bool_cvt

def assisted_cvt (value, tag = None) :
    return bool_cvt (value, tag, true = 'ASSISTED', false = 'NON-ASSISTED')
# end def assisted_cvt

def int_cvt (value, tag = None) :
    """
    >>> int_cvt ('9447')
    9447
    >>> int_cvt ('4294967296', 'CLAIMED-SCORE')
    Traceback (most recent call last):
    ...
    cabrillo.error.Conversion_Error: Invalid value '4294967296' in tag 'CLAIMED-SCORE' (out of range)
    """
    v = value.strip ()
    if not re_number.match (v) :
        raise Conversion_Error (tag, value, 'not a number')
    v = int (v)
    if v > max_int :
        raise Conversion_Error (tag, value, 'out of range')
    return v
# end def int_cvt

def version_cvt (value, tag = None) :
    v = value.strip ()
    if not re_version.match (v) :
        raise Conversion_Error (tag, value, 'not a version number')
    return float (v)
# end def version_cvt

def date_cvt (value, tag = None) :
    """ Strict YYYY-MM-DD HHMM, no time zone.
        strptime is lenient about field widths, so these are checked
        first.
    >>> date_cvt ('2000-10-26 0711')
    datetime.datetime(2000, 10, 26, 7, 11)
    >>> date_cvt ('2000-02-30 0711', 'QSO')
    Traceback (most recent call last):
    ...
    cabrillo.error.Conversion_Error: Invalid value '2000-02-30 0711' in tag 'QSO' (invalid date/time)
    >>> date_cvt ('2000-1-26 711', 'QSO')
    Traceback (most recent call last):
    ...
    cabrillo.error.Conversion_Error: Invalid value '2000-1-26 711' in tag 'QSO' (expected YYYY-MM-DD HHMM)
    """
    v = value.strip ()
    if not re_date.match (v) :
        raise Conversion_Error (tag, value, 'expected YYYY-MM-DD HHMM')
    try :
        return datetime.strptime (v, date_format)
    except ValueError :
        raise Conversion_Error (tag, value, 'invalid date/time')
# end def date_cvt

def offtime_cvt (value, tag = None) :
    """
    >>> offtime_cvt ('2000-10-26 0900  2000-10-26 1100').end
    datetime.datetime(2000, 10, 26, 11, 0)
    """
    f = value.split ()
    if len (f) != 4 :
        raise Conversion_Error (tag, value, 'expected begin and end date/time')
    begin = date_cvt (' '.join (f [:2]), tag)
    end   = date_cvt (' '.join (f [2:]), tag)
    return Offtime (begin, end)
# end def offtime_cvt

def frequency_cvt (value, tag = None) :
    """ Band designator or frequency in kHz.
        Band designators are tried first, numeric designators like 50
        or 144 are bands, not kHz.
    >>> frequency_cvt ('14256')
    14256
    >>> frequency_cvt ('144').name
    'BAND_2M'
    >>> frequency_cvt ('ALL', 'QSO')
    Traceback (most recent call last):
    ...
    cabrillo.error.Conversion_Error: Invalid value 'ALL' in tag 'QSO' (not a band or frequency)
    """
    v = value.strip ()
    for band in Band :
        if band.is_band and v.upper () in band.value :
            return band
    if re_number.match (v) :
        return int (v)
    raise Conversion_Error (tag, value, 'not a band or frequency')
# end def frequency_cvt

def operators_cvt (value, tag = None) :
    """ Whitespace or comma separated list of callsigns, the host
        station may be marked with a leading '@'.
    >>> operators_cvt ('K1XM, KA1ZZZ @K5ZD')
    ['K1XM', 'KA1ZZZ', '@K5ZD']
    """
    return [op for op in re_operator.split (value.strip ()) if op]
# end def operators_cvt

def email_cvt (value, tag = None) :
    v = value.strip ()
    if not re_email.match (v) :
        raise Conversion_Error (tag, value, 'not a valid email address')
    return v
# end def email_cvt

def locator_cvt (value, tag = None) :
    v = value.strip ()
    if not Maidenhead_Locator.is_valid (v) :
        raise Conversion_Error (tag, value, 'not a valid grid locator')
    return v
# end def locator_cvt
