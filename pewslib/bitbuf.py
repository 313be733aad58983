"""
module for bit-level access to PEWS binary messages

bits are numbered MSB first: bit 0 is the most significant bit of byte 0,
and numbering continues across byte boundaries.
"""

import bitstruct as bs


class DecodeError(ValueError):
    """ raised when a field lies outside of the available bits """

    def __init__(self, field, pos, len_, nbit):
        self.field = field
        self.pos = pos
        self.len_ = len_
        self.nbit = nbit
        super().__init__(
            "cannot read {}: bits [{},{}) exceed message length {}"
            .format(field or 'field', pos, pos+len_, nbit))


class bitBuf():
    """ class for MSB-first bit view over a byte sequence """

    def __init__(self, buff, pos=0, nbit=-1):
        self.buff = bytes(buff)
        nmax = len(self.buff)*8
        if nbit < 0:
            nbit = nmax-pos
        if pos < 0 or nbit < 0 or pos+nbit > nmax:
            raise DecodeError('view', pos, max(nbit, 0), nmax)
        self.pos = pos
        self.nbit = nbit

    def __len__(self):
        return self.nbit

    def check(self, pos, len_, name=''):
        """ check that [pos, pos+len_) lies within the view """
        if pos < 0 or len_ < 0 or pos+len_ > self.nbit:
            raise DecodeError(name, pos, len_, self.nbit)

    def getbitu(self, pos, len_, name=''):
        """ read unsigned integer of len_ bits at pos """
        self.check(pos, len_, name)
        if len_ == 0:
            return 0
        return bs.unpack_from('u'+str(len_), self.buff, self.pos+pos)[0]

    def unpack(self, fmt, pos, name=''):
        """ read several fields at pos with bitstruct format fmt """
        self.check(pos, bs.calcsize(fmt), name)
        return bs.unpack_from(fmt, self.buff, self.pos+pos)

    def subrange(self, pos, len_, name=''):
        """ return view of bits [pos, pos+len_) """
        self.check(pos, len_, name)
        return bitBuf(self.buff, self.pos+pos, len_)


def decode_mask(din, bitlen):
    """ decode n-bit mask, return indices of set bits """
    v = []
    for k in range(0, bitlen):
        if din & 1 << (bitlen-k-1):
            v.append(k)
    return v
