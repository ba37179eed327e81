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

class Cabrillo_Error (Exception) : pass

class Encoding_Error    (Cabrillo_Error, ValueError) : pass
class Empty_Input_Error (Cabrillo_Error, ValueError) : pass

class Conversion_Error (Cabrillo_Error, ValueError) :
    """ Payload of a tag could not be converted to its typed value.
        This is never fatal for the whole log, the offending line ends
        up in the ignored entries of the log.
    """

    def __init__ (self, tag, value, reason = None) :
        self.tag    = tag
        self.value  = value
        self.reason = reason
        msg = "Invalid value '%s' in tag '%s'" % (value, tag)
        if reason :
            msg = '%s (%s)' % (msg, reason)
        Cabrillo_Error.__init__ (self, msg)
    # end def __init__

# end class Conversion_Error

class Unknown_Variant (Conversion_Error) :
    """ Token is not in the closed vocabulary of an enumerated tag
    >>> e = Unknown_Variant ('CATEGORY-POWER', 'MEDIUM')
    >>> str (e)
    "Invalid value 'MEDIUM' in tag 'CATEGORY-POWER' (unknown variant)"
    >>> e.token
    'MEDIUM'
    """

    def __init__ (self, tag, token) :
        self.token = token
        Conversion_Error.__init__ (self, tag, token, 'unknown variant')
    # end def __init__

# end class Unknown_Variant
