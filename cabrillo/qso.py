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

from collections       import namedtuple
from cabrillo.error    import Conversion_Error, Unknown_Variant
from cabrillo.category import Mode
from cabrillo.bandplan import contest_bandplan
from cabrillo          import convert

class Signal_Report (namedtuple ('Signal_Report', 'readability strength tone')) :
    """ RST report, the tone is 0 if not given (phone)
    >>> Signal_Report.parse ('599')
    Signal_Report(readability=5, strength=9, tone=9)
    >>> Signal_Report.parse ('34')
    Signal_Report(readability=3, strength=4, tone=0)
    >>> Signal_Report.parse ('999')
    Traceback (most recent call last):
    ...
    ValueError: Invalid signal report: 999
    """
    __slots__ = ()

    @classmethod
    def parse (cls, rst) :
        if not (2 <= len (rst) <= 3 and rst.isdigit ()) :
            raise ValueError ('Invalid signal report: %s' % rst)
        r, s, t = (int (c) for c in (rst + '0') [:3])
        if not (1 <= r <= 5 and 1 <= s <= 9) :
            raise ValueError ('Invalid signal report: %s' % rst)
        return cls (r, s, t)
    # end def parse

# end class Signal_Report

class QSO (namedtuple
    ( 'QSO'
    , 'frequency mode datetime call_sent exch_sent'
      ' call_recvd exch_recvd transmitter_id'
    )) :
    """ Represents one contact of the log.
        The exchange is contest specific and may consist of several
        fields, these are joined with a single blank.
    >>> q = QSO.parse ('14256 PH 2000-10-26 0711 AA1ZZZ 59 05 P29AS 59 28 0')
    >>> q.frequency, q.mode.name, q.call_recvd, q.exch_recvd
    (14256, 'PHONE', 'P29AS', '59 28')
    >>> q.band.token, q.mhz
    ('20M', 14.256)
    >>> q.rst_sent
    Signal_Report(readability=5, strength=9, tone=0)
    """
    __slots__ = ()

    @classmethod
    def parse (cls, value, tag = 'QSO') :
        f = value.split ()
        if len (f) < 8 :
            raise Conversion_Error (tag, value, 'too few fields')
        frq, mode, date, time = f [:4]
        rest = f [4:]
        tx   = False
        if len (rest) % 2 and rest [-1] in ('0', '1') :
            tx   = rest.pop () == '1'
        if len (rest) % 2 or len (rest) < 4 :
            raise Conversion_Error (tag, value, 'wrong number of fields')
        half  = len (rest) // 2
        sent  = rest [:half]
        recvd = rest [half:]
        mode  = Mode.parse (mode, tag)
        if mode is Mode.MIXED :
            raise Unknown_Variant (tag, f [1])
        return cls \
            ( frequency      = convert.frequency_cvt (frq, tag)
            , mode           = mode
            , datetime       = convert.date_cvt (' '.join ((date, time)), tag)
            , call_sent      = sent [0]
            , exch_sent      = ' '.join (sent [1:])
            , call_recvd     = recvd [0]
            , exch_recvd     = ' '.join (recvd [1:])
            , transmitter_id = tx
            )
    # end def parse

    @property
    def band (self) :
        """ Band of the contact, frequencies in kHz are looked up in
            the contest band plan. None if outside all contest bands.
        """
        if isinstance (self.frequency, int) :
            r = contest_bandplan.lookup (self.frequency)
            return r.band if r else None
        return self.frequency
    # end def band

    @property
    def mhz (self) :
        if isinstance (self.frequency, int) :
            return self.frequency / 1000.
        return None
    # end def mhz

    def _rst (self, exchange) :
        try :
            return Signal_Report.parse (exchange.split () [0])
        except ValueError :
            return None
    # end def _rst

    @property
    def rst_sent (self) :
        return self._rst (self.exch_sent)
    # end def rst_sent

    @property
    def rst_recvd (self) :
        return self._rst (self.exch_recvd)
    # end def rst_recvd

# end class QSO
