from context import errors, interfaces, keys, signer
from ecdsa import NIST256p, SigningKey
import unittest


class TestKeyPair(unittest.TestCase):
    def setUp(self) -> None:
        self.kp = signer.KeyPair.from_private_key(b'yellow submarine is extra yellow')
        return super().setUp()

    def test_KeyPair_implements_CanSign(self):
        assert isinstance(self.kp, interfaces.CanSign)

    def test_public_key_forms(self):
        assert len(self.kp.public_key) == 33
        assert self.kp.public_key[0] in (2, 3)
        assert len(self.kp.public_key_uncompressed) == 65
        assert self.kp.public_key_uncompressed[0] == 4
        assert keys.compress(self.kp.public_key_uncompressed) == self.kp.public_key

    def test_sign_is_deterministic_and_64_bytes(self):
        sig1 = self.kp.sign(b'hello world')
        sig2 = self.kp.sign(b'hello world')
        assert sig1 == sig2
        assert len(sig1) == 64
        assert self.kp.sign(b'hello world!') != sig1

    def test_verify(self):
        sig = self.kp.sign(b'hello world')
        assert self.kp.verify(b'hello world', sig)
        assert not self.kp.verify(b'hello world!', sig)
        assert not self.kp.verify(b'hello world', sig[:63])
        other = signer.KeyPair.from_private_key(b'submarine such yellow extra very')
        assert not other.verify(b'hello world', sig)

    def test_private_key_round_trip(self):
        kp = signer.KeyPair.from_private_key(self.kp.private_key)
        assert kp.public_key == self.kp.public_key

    def test_generate(self):
        kp = signer.KeyPair.generate()
        assert len(kp.private_key) == 32
        assert kp.verify(b'msg', kp.sign(b'msg'))

    def test_rejects_bad_keys(self):
        with self.assertRaises(errors.InvalidArgument):
            signer.KeyPair.from_private_key(b'\x01' * 31)
        with self.assertRaises(TypeError):
            signer.KeyPair.from_private_key('01' * 32)
        with self.assertRaises(TypeError):
            signer.KeyPair(b'\x01' * 32)
        with self.assertRaises(errors.InvalidArgument):
            signer.KeyPair(SigningKey.generate())
        signer.KeyPair(SigningKey.generate(curve=NIST256p))


if __name__ == '__main__':
    unittest.main()
