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
from cabrillo.log    import Cabrillo_Log, Ignored_Line
from cabrillo.parser import parse

class Test_Log :

    def test_defaults (self) :
        log = Cabrillo_Log ()
        assert log.version == Cabrillo_Log.default_version
        for k in Cabrillo_Log.header :
            assert getattr (log, k) is None
        for k in Cabrillo_Log.sequences :
            assert getattr (log, k) == ()
        assert log.host_operator is None
        assert log.position is None
        assert log.soapbox_text == ''
    # end def test_defaults

    def test_unknown_field (self) :
        with pytest.raises (TypeError) :
            Cabrillo_Log (frequency = 14000)
    # end def test_unknown_field

    def test_read_only (self, sample) :
        log = parse (sample)
        with pytest.raises (AttributeError) :
            log.callsign = 'OE3RSU'
        with pytest.raises (AttributeError) :
            del log.contest
        with pytest.raises (TypeError) :
            log.other_tags ['X-NEW'] = 'value'
        with pytest.raises (AttributeError) :
            log.entries.append (None)
        assert log.callsign == 'AA1ZZZ'
    # end def test_read_only

    def test_copied_input (self) :
        ops  = ['K1XM']
        tags = {'X-A': '1'}
        log  = Cabrillo_Log (operators = ops, other_tags = tags)
        ops.append ('K5ZD')
        tags ['X-B'] = '2'
        assert log.operators == ('K1XM',)
        assert dict (log.other_tags) == {'X-A': '1'}
    # end def test_copied_input

    def test_equality (self) :
        a = Cabrillo_Log (callsign = 'K1A', other_tags = {'X-A': '1'})
        b = Cabrillo_Log (callsign = 'K1A', other_tags = {'X-A': '1'})
        c = Cabrillo_Log (callsign = 'K1A', other_tags = {'X-A': '2'})
        assert a == b
        assert a != c
        assert a != 'K1A'
        with pytest.raises (TypeError) :
            hash (a)
    # end def test_equality

    def test_by_call (self) :
        log = parse \
            ( 'QSO: 7000 CW 2021-01-01 0001 K1A 599 1 K2A 599 2\n'
              'QSO: 3500 CW 2021-01-01 0002 K1A 599 1 K3A 599 3\n'
              'QSO: 1800 CW 2021-01-01 0003 K1A 599 1 K2A 599 4\n'
            )
        assert sorted (log.by_call) == ['K2A', 'K3A']
        assert [q.exch_recvd for q in log.by_call ['K2A']] == ['599 2', '599 4']
        assert list (log) == list (log.entries)
    # end def test_by_call

    def test_host_operator (self) :
        assert Cabrillo_Log (operators = ['K1XM', 'KA1ZZZ']).host_operator \
            is None
        assert Cabrillo_Log (operators = ['K1XM', '@K5ZD']).host_operator \
            == 'K5ZD'
    # end def test_host_operator

    def test_repr (self, noisy) :
        assert repr (parse (noisy)) == \
            '<Cabrillo_Log OE3RSU -: 2 QSOs, 5 ignored>'
    # end def test_repr

    def test_ignored_line (self) :
        i = Ignored_Line ('garbage', 'line 1: malformed line', 1)
        assert i.line   == 'garbage'
        assert i.lineno == 1
    # end def test_ignored_line

# end class Test_Log
