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

import pytest
from datetime          import datetime
from cabrillo.qso      import QSO, Signal_Report
from cabrillo.category import Band, Mode
from cabrillo.error    import Conversion_Error, Unknown_Variant

class Test_QSO :

    def test_example (self) :
        q = QSO.parse ('14256 PH 2000-10-26 0711 AA1ZZZ 59 05 P29AS 59 28 0')
        assert q == QSO \
            ( frequency      = 14256
            , mode           = Mode.PHONE
            , datetime       = datetime (2000, 10, 26, 7, 11)
            , call_sent      = 'AA1ZZZ'
            , exch_sent      = '59 05'
            , call_recvd     = 'P29AS'
            , exch_recvd     = '59 28'
            , transmitter_id = False
            )
    # end def test_example

    def test_minimal (self) :
        q = QSO.parse ('7000 CW 2021-01-01 0000 K1A 1 K2A 2')
        assert q.call_sent  == 'K1A'
        assert q.exch_sent  == '1'
        assert q.call_recvd == 'K2A'
        assert q.exch_recvd == '2'
        assert q.transmitter_id is False
    # end def test_minimal

    def test_second_transmitter (self) :
        q = QSO.parse ('7000 CW 2021-01-01 0000 K1A 599 MA K2A 599 CT 1')
        assert q.transmitter_id is True
        assert q.exch_sent  == '599 MA'
        assert q.exch_recvd == '599 CT'
    # end def test_second_transmitter

    def test_long_exchange (self) :
        q = QSO.parse \
            ('3510 CW 2021-01-01 0000 K1A 599 1 A MA K2A 599 2 B CT')
        assert q.exch_sent  == '599 1 A MA'
        assert q.exch_recvd == '599 2 B CT'
    # end def test_long_exchange

    def test_too_few_fields (self) :
        with pytest.raises (Conversion_Error) as err :
            QSO.parse ('14001 CW 2021-03-27 1201 OE3RSU 599 DL2ABC')
        assert err.value.reason == 'too few fields'
        assert err.value.tag    == 'QSO'
    # end def test_too_few_fields

    def test_odd_fields (self) :
        for line in \
            ( '7000 CW 2021-01-01 0000 K1A 599 1 K2A 599 2 X'
            , '7000 CW 2021-01-01 0000 K1A 599 K2A 599 2'
            ) :
            with pytest.raises (Conversion_Error) as err :
                QSO.parse (line)
            assert err.value.reason == 'wrong number of fields'
    # end def test_odd_fields

    def test_band_designator (self) :
        q = QSO.parse ('144 CW 2021-01-01 0000 K1A 599 JN88 K2A 599 JN78')
        assert q.frequency is Band.BAND_2M
        assert q.band      is Band.BAND_2M
        assert q.mhz       is None
        q = QSO.parse ('1.2g FM 2021-01-01 0000 K1A 59 JN88 K2A 59 JN78')
        assert q.frequency is Band.BAND_1_2G
    # end def test_band_designator

    def test_frequency (self) :
        q = QSO.parse ('10120 CW 2021-01-01 0000 K1A 599 1 K2A 599 2')
        assert q.frequency == 10120
        assert q.band is None
        assert q.mhz  == 10.12
        with pytest.raises (Conversion_Error) as err :
            QSO.parse ('14.2 CW 2021-01-01 0000 K1A 599 1 K2A 599 2')
        assert err.value.reason == 'not a band or frequency'
    # end def test_frequency

    def test_mode (self) :
        q = QSO.parse ('14080 ry 2021-01-01 0000 K1A 599 1 K2A 599 2')
        assert q.mode is Mode.RTTY
        with pytest.raises (Unknown_Variant) :
            QSO.parse ('14080 XX 2021-01-01 0000 K1A 599 1 K2A 599 2')
        with pytest.raises (Unknown_Variant) :
            QSO.parse ('14080 MIXED 2021-01-01 0000 K1A 599 1 K2A 599 2')
    # end def test_mode

    def test_date (self) :
        for dt in '2021-01-01 2400', '2021-13-01 0000', '21-01-01 0000' :
            with pytest.raises (Conversion_Error) :
                QSO.parse ('14080 CW %s K1A 599 1 K2A 599 2' % dt)
    # end def test_date

    def test_rst (self) :
        q = QSO.parse ('14256 PH 2000-10-26 0711 AA1ZZZ 57 05 P29AS 59 28')
        assert q.rst_sent  == Signal_Report (5, 7, 0)
        assert q.rst_recvd == Signal_Report (5, 9, 0)
        q = QSO.parse ('14000 CW 2000-10-26 0711 AA1ZZZ 5NN 05 P29AS 1 28')
        assert q.rst_sent  is None
        assert q.rst_recvd is None
    # end def test_rst

# end class Test_QSO

class Test_Signal_Report :

    def test_valid (self) :
        assert Signal_Report.parse ('599') == (5, 9, 9)
        assert Signal_Report.parse ('11')  == (1, 1, 0)
    # end def test_valid

    def test_invalid (self) :
        for rst in '5', '5999', '699', '509', '5x9', '' :
            with pytest.raises (ValueError) :
                Signal_Report.parse (rst)
    # end def test_invalid

# end class Test_Signal_Report
