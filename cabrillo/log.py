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

from types         import MappingProxyType
from collections   import namedtuple
from cabrillo.qth  import Maidenhead_Locator

class Ignored_Line (namedtuple ('Ignored_Line', 'line reason lineno')) :
    """ A line that could not be parsed, with a human-readable reason """
    __slots__ = ()
# end class Ignored_Line

class Cabrillo_Log (object) :
    """ Result of parsing a Cabrillo log.
        The log is read-only once constructed, the multi-valued fields
        are tuples and other_tags is a read-only mapping.
    >>> log = Cabrillo_Log (callsign = 'OE3RSU', operators = ['@OE3RSU'])
    >>> log.version, log.callsign, log.contest, log.operators
    (3.0, 'OE3RSU', None, ('@OE3RSU',))
    >>> log.host_operator
    'OE3RSU'
    >>> log.callsign = 'OE1XXX'
    Traceback (most recent call last):
    ...
    AttributeError: Cabrillo_Log is read-only
    """

    default_version = 3.0

    header = \
        ( 'callsign'
        , 'contest'
        , 'category_assisted'
        , 'category_band'
        , 'category_mode'
        , 'category_operator'
        , 'category_power'
        , 'category_station'
        , 'category_time'
        , 'category_transmitter'
        , 'category_overlay'
        , 'certificate'
        , 'claimed_score'
        , 'club'
        , 'created_by'
        , 'email'
        , 'grid_locator'
        , 'location'
        , 'name'
        , 'address'
        )
    sequences = \
        ( 'operators', 'offtimes', 'soapbox', 'entries', 'x_entries'
        , 'ignored_entries'
        )

    def __init__ (self, version = None, other_tags = None, **kw) :
        d = self.__dict__
        if version is None :
            version = self.default_version
        d ['version'] = version
        for k in self.header :
            d [k] = kw.pop (k, None)
        for k in self.sequences :
            d [k] = tuple (kw.pop (k, ()))
        if kw :
            raise TypeError ('Unknown field(s): %s' % ', '.join (sorted (kw)))
        d ['other_tags'] = MappingProxyType (dict (other_tags or {}))
        by_call = {}
        for qso in self.entries :
            by_call.setdefault (qso.call_recvd, []).append (qso)
        d ['by_call'] = MappingProxyType \
            (dict ((k, tuple (v)) for k, v in by_call.items ()))
    # end def __init__

    @property
    def host_operator (self) :
        """ The host station is marked with '@' in the OPERATORS list """
        for op in self.operators :
            if op.startswith ('@') :
                return op [1:]
        return None
    # end def host_operator

    @property
    def position (self) :
        if self.grid_locator :
            return Maidenhead_Locator.from_locator (self.grid_locator)
        return None
    # end def position

    @property
    def soapbox_text (self) :
        return '\n'.join (self.soapbox)
    # end def soapbox_text

    def _key (self) :
        return \
            ( (self.version,)
            + tuple (getattr (self, k) for k in self.header)
            + tuple (getattr (self, k) for k in self.sequences)
            + (sorted (self.other_tags.items ()),)
            )
    # end def _key

    def __eq__ (self, other) :
        if not isinstance (other, Cabrillo_Log) :
            return NotImplemented
        return self._key () == other._key ()
    # end def __eq__
    __hash__ = None

    def __setattr__ (self, name, value) :
        raise AttributeError ('Cabrillo_Log is read-only')
    # end def __setattr__

    def __delattr__ (self, name) :
        raise AttributeError ('Cabrillo_Log is read-only')
    # end def __delattr__

    def __iter__ (self) :
        for qso in self.entries :
            yield qso
    # end def __iter__

    def __repr__ (self) :
        return '<Cabrillo_Log %s %s: %d QSOs, %d ignored>' % \
            ( self.callsign or '-', self.contest or '-'
            , len (self.entries), len (self.ignored_entries)
            )
    # end def __repr__

# end class Cabrillo_Log
