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

import io
import sys
import logging
from re                 import compile as rc
from argparse           import ArgumentParser
from rsclib.autosuper   import autosuper
from rsclib.stateparser import Parser
from cabrillo.error     import Conversion_Error, Encoding_Error
from cabrillo.error     import Empty_Input_Error
from cabrillo.category  import *
from cabrillo.qso       import QSO
from cabrillo.log       import Cabrillo_Log, Ignored_Line
from cabrillo.convert   import text_cvt, bool_cvt, assisted_cvt, int_cvt
from cabrillo.convert   import version_cvt, offtime_cvt, operators_cvt
from cabrillo.convert   import email_cvt, locator_cvt

def split_lines (buf) :
    """ Split buffer into lines, lines may be terminated by '\\n' or
        '\\r\\n'. Blank lines are kept.
    >>> split_lines (b'START-OF-LOG: 3.0\\r\\n\\r\\nEND-OF-LOG:\\n')
    ['START-OF-LOG: 3.0', '', 'END-OF-LOG:']
    >>> split_lines (b'\\xff')
    Traceback (most recent call last):
    ...
    cabrillo.error.Encoding_Error: Not valid UTF-8: invalid start byte at offset 0
    """
    if not len (buf) :
        raise Empty_Input_Error ('Empty input')
    if isinstance (buf, (bytes, bytearray)) :
        try :
            buf = bytes (buf).decode ('utf-8-sig')
        except UnicodeDecodeError as err :
            raise Encoding_Error \
                ('Not valid UTF-8: %s at offset %d' % (err.reason, err.start))
    elif buf.startswith ('\ufeff') :
        buf = buf [1:]
    lines = buf.split ('\n')
    if lines [-1] == '' :
        del lines [-1]
    return [l [:-1] if l.endswith ('\r') else l for l in lines]
# end def split_lines

class Log_Mixin (autosuper) :

    def __init__ (self, verbose = False, **kw) :
        self.verbose = verbose
        self.log     = logging.getLogger ('cabrillo')
        self.__super.__init__ (**kw)
    # end def __init__

    def info (self, *args) :
        if self.verbose :
            self.log.info (' '.join (str (a) for a in args))
    # end def info

# end class Log_Mixin

class Cabrillo_Parser (Log_Mixin, Parser) :
    """ Assemble a Cabrillo_Log from the lines of a log.
        Lines that cannot be parsed end up in the ignored entries,
        unknown tags in other_tags, nothing here is fatal.
    """

    encoding = None
    re_blank = rc (r'^\s*(#.*)?$')
    re_end   = rc (r'^\s*END-OF-LOG\s*(:.*)?$')
    re_start = rc (r'^\s*START-OF-LOG\s*(:\s*)?$')
    re_tag   = rc (r'^\s*([A-Za-z0-9][-A-Za-z0-9_]*)\s*:(.*)$')

    # State  Pattern    new State Action
    matrix = \
    [ ["log", re_blank, 'log',    None]
    , ["log", re_end,   'end',    "end_of_log"]
    , ["log", re_start, 'log',    None]
    , ["log", re_tag,   'log',    "set_tag"]
    , ["log", None,     'log',    "malformed"]
    , ["end", None,     'end',    "trailing"]
    ]

    # Kind 'single' sets the attribute, the last one wins, 'append'
    # appends the converted value, 'extend' each of a list of values.
    # Tag                       Kind      Attribute               Converter
    tags = \
    [ ('START-OF-LOG',          'single', 'version',              version_cvt)
    , ('VERSION',               'single', 'version',              version_cvt)
    , ('CALLSIGN',              'single', 'callsign',             text_cvt)
    , ('CONTEST',               'single', 'contest',              text_cvt)
    , ('CATEGORY-ASSISTED',     'single', 'category_assisted',    assisted_cvt)
    , ('CATEGORY-BAND',         'single', 'category_band',        Band.parse)
    , ('CATEGORY-MODE',         'single', 'category_mode',        Mode.parse)
    , ('CATEGORY-OPERATOR',     'single', 'category_operator'
                                        , Operator_Category.parse)
    , ('CATEGORY-POWER',        'single', 'category_power'
                                        , Power_Category.parse)
    , ('CATEGORY-STATION',      'single', 'category_station'
                                        , Station_Category.parse)
    , ('CATEGORY-TIME',         'single', 'category_time'
                                        , Time_Category.parse)
    , ('CATEGORY-TRANSMITTER',  'single', 'category_transmitter'
                                        , Transmitter_Category.parse)
    , ('CATEGORY-OVERLAY',      'single', 'category_overlay'
                                        , Overlay_Category.parse)
    , ('CERTIFICATE',           'single', 'certificate',          bool_cvt)
    , ('CLAIMED-SCORE',         'single', 'claimed_score',        int_cvt)
    , ('CLUB',                  'single', 'club',                 text_cvt)
    , ('CREATED-BY',            'single', 'created_by',           text_cvt)
    , ('EMAIL',                 'single', 'email',                email_cvt)
    , ('GRID-LOCATOR',          'single', 'grid_locator',         locator_cvt)
    , ('LOCATION',              'single', 'location',             text_cvt)
    , ('NAME',                  'single', 'name',                 text_cvt)
    , ('ADDRESS',               'append', 'address',              text_cvt)
    , ('ADDRESS-CITY',          'append', 'address',              text_cvt)
    , ('ADDRESS-STATE-PROVINCE','append', 'address',              text_cvt)
    , ('ADDRESS-POSTALCODE',    'append', 'address',              text_cvt)
    , ('ADDRESS-COUNTRY',       'append', 'address',              text_cvt)
    , ('OPERATORS',             'extend', 'operators',            operators_cvt)
    , ('OFFTIME',               'append', 'offtimes',             offtime_cvt)
    , ('SOAPBOX',               'append', 'soapbox',              text_cvt)
    , ('QSO',                   'append', 'entries',              QSO.parse)
    ]

    # Extension tags stay in other_tags, the ones listed here are in
    # addition converted and appended to the attribute.
    # Tag       Attribute     Converter
    x_tags = \
    [ ('X-QSO', 'x_entries', QSO.parse)
    ]

    def __init__ (self, **kw) :
        self.values     = {}
        self.other_tags = {}
        self.ignored    = []
        self.n_trailing = 0
        self.by_tag     = {}
        for tag, kind, attr, cvt in self.tags :
            self.by_tag [tag] = (kind, attr, cvt)
            if kind != 'single' :
                self.values [attr] = []
        self.by_x_tag   = {}
        for tag, attr, cvt in self.x_tags :
            self.by_x_tag [tag] = (attr, cvt)
            self.values [attr]  = []
        self.__super.__init__ (**kw)
    # end def __init__

    def as_log (self) :
        d = dict (self.values)
        address = d.pop ('address')
        if address :
            d ['address'] = '\n'.join (address)
        if self.n_trailing :
            self.info ('Skipped %d line(s) after END-OF-LOG' % self.n_trailing)
        return Cabrillo_Log \
            ( other_tags      = self.other_tags
            , ignored_entries = self.ignored
            , **d
            )
    # end def as_log

    def ignore (self, reason) :
        reason = 'line %s: %s' % (self.lineno, reason)
        self.info ('Ignored %s: %r' % (reason, self.line))
        self.ignored.append (Ignored_Line (self.line, reason, self.lineno))
    # end def ignore

    # Parsing methods below this line

    def end_of_log (self, state, new_state, match) :
        self.info ('%s: END-OF-LOG' % self.lineno)
    # end def end_of_log

    def malformed (self, state, new_state, match) :
        self.ignore ('malformed line (no tag found)')
    # end def malformed

    def set_tag (self, state, new_state, match) :
        tag, value = match.groups ()
        value = value.strip ()
        if tag not in self.by_tag :
            self.info ('%s: Unknown tag %s' % (self.lineno, tag))
            self.other_tags [tag] = value
            if tag in self.by_x_tag :
                attr, cvt = self.by_x_tag [tag]
                try :
                    self.values [attr].append (cvt (value, tag))
                except Conversion_Error as err :
                    self.ignore (str (err))
            return
        kind, attr, cvt = self.by_tag [tag]
        # Empty free text is the same as a missing tag
        if kind == 'single' and not value and cvt is text_cvt :
            return
        try :
            v = cvt (value, tag)
        except Conversion_Error as err :
            self.ignore (str (err))
            return
        if kind == 'single' :
            if attr in self.values :
                self.info \
                    ( '%s: Duplicate %s, replacing %r'
                    % (self.lineno, tag, self.values [attr])
                    )
            self.values [attr] = v
        elif kind == 'append' :
            self.values [attr].append (v)
        else :
            self.values [attr].extend (v)
    # end def set_tag

    def trailing (self, state, new_state, match) :
        self.n_trailing += 1
    # end def trailing

# end class Cabrillo_Parser

def parse (buf, debug = False, **kw) :
    """ Parse a Cabrillo log from bytes or text.
        Raises Encoding_Error and Empty_Input_Error, every other problem
        is reported in the ignored_entries and other_tags of the log.
        With debug, ignored and unknown lines are also logged, further
        keyword arguments (e.g. debug_level) go to the parser.
    """
    lines  = split_lines (buf)
    parser = Cabrillo_Parser (verbose = debug, **kw)
    parser.parse (lines)
    return parser.as_log ()
# end def parse

def main () :
    cmd = ArgumentParser ()
    cmd.add_argument \
        ( "cabrillo"
        , help    = "Cabrillo log to parse, default is standard input"
        , nargs   = '?'
        )
    cmd.add_argument \
        ( "-d", "--debug"
        , help    = "Report ignored lines and unknown tags"
        , action  = 'store_true'
        )
    args = cmd.parse_args ()
    logging.basicConfig \
        ( level  = logging.INFO if args.debug else logging.WARNING
        , format = '%(name)s: %(message)s'
        )
    if args.cabrillo :
        with io.open (args.cabrillo, 'rb') as f :
            buf = f.read ()
    else :
        buf = sys.stdin.buffer.read ()
    log = parse (buf, debug = args.debug)
    print ('%20s: %s' % ('version', log.version))
    for k in Cabrillo_Log.header :
        v = getattr (log, k)
        if v is not None :
            print ('%20s: %s' % (k, str (v).replace ('\n', ', ')))
    for k in 'operators', 'offtimes', 'soapbox' :
        for v in getattr (log, k) :
            print ('%20s: %s' % (k, v))
    for k in sorted (log.other_tags) :
        print ('%20s: %s' % (k, log.other_tags [k]))
    print ("Got %s QSOs" % len (log.entries))
    if log.x_entries :
        print ("Got %s X-QSOs" % len (log.x_entries))
    for ign in log.ignored_entries :
        print ('Ignored %s' % ign.reason)
# end def main

if __name__ == '__main__' :
    main ()
