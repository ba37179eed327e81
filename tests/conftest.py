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

sample_log = '''\
START-OF-LOG: 3.0
CONTEST: CQ-WW-SSB
CALLSIGN: AA1ZZZ
CATEGORY-ASSISTED: NON-ASSISTED
CATEGORY-BAND: ALL
CATEGORY-MODE: SSB
CATEGORY-OPERATOR: SINGLE-OP
CATEGORY-POWER: HIGH
CATEGORY-STATION: FIXED
CATEGORY-TIME: 24-HOURS
CATEGORY-TRANSMITTER: ONE
CATEGORY-OVERLAY: CLASSIC
CERTIFICATE: YES
CLAIMED-SCORE: 9447
CLUB: Yankee Clipper Contest Club
CREATED-BY: WriteLog V10.72C
EMAIL: aa1zzz@example.com
GRID-LOCATOR: FN42
LOCATION: WMA
NAME: Randy Thompson
ADDRESS: 11 Hollis Street
ADDRESS-CITY: Uxbridge
ADDRESS-STATE-PROVINCE: MA
ADDRESS-POSTALCODE: 01569
ADDRESS-COUNTRY: USA
OPERATORS: K1XM KA1ZZZ @K5ZD
OFFTIME: 2000-10-26 0900 2000-10-26 1100
SOAPBOX: Put your comments here.
SOAPBOX: Use multiple lines if needed.
X-CQ-CUSTOM: anything goes
QSO:  3799 PH 2000-10-26 0711 AA1ZZZ 59 05 EI3ZZZ 59 14 0
QSO: 14256 PH 2000-10-26 0711 AA1ZZZ 59 05 P29AS 59 28 0
QSO: 21250 PH 2000-10-26 0712 AA1ZZZ 59 05 4S7ZZZ 59 22 0
QSO: 28530 PH 2000-10-26 0713 AA1ZZZ 59 05 JA1ZZZ 59 25 0
END-OF-LOG:
'''

noisy_log = '''\
START-OF-LOG: 3.0
CALLSIGN: OE3RSU
CATEGORY-POWER: MEDIUM
this line has no tag
QSO: 14000 CW 2021-03-27 1200 OE3RSU 599 15 DL1ABC 599 14
QSO: 14001 CW 2021-03-27 1201 OE3RSU 599 DL2ABC
QSO: 14002 CW 2021-03-27 1261 OE3RSU 599 15 DL3ABC 599 14
QSO: 14003 XX 2021-03-27 1203 OE3RSU 599 15 DL4ABC 599 14
X-QSO: 14004 CW 2021-03-27 1204 OE3RSU 599 15 DL5ABC 599 14
QSO: 14005 CW 2021-03-27 1205 OE3RSU 599 15 DL6ABC 599 14
END-OF-LOG:
'''

@pytest.fixture
def sample () :
    return sample_log.encode ('utf-8')
# end def sample

@pytest.fixture
def noisy () :
    return noisy_log.encode ('utf-8')
# end def noisy
