from context import hashing
import unittest


class TestHashing(unittest.TestCase):
    def test_sha256_known_vector(self):
        assert hashing.sha256(b'').hex() == \
            'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
        assert hashing.sha256(b'abc').hex() == \
            'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

    def test_hash256_is_double_sha256(self):
        assert hashing.hash256(b'abc') == hashing.sha256(hashing.sha256(b'abc'))
        assert len(hashing.hash256(b'abc')) == 32

    def test_ripemd160_known_vector(self):
        assert hashing.ripemd160(b'').hex() == \
            '9c1185a5c5e9fc54612808977ee8f548b2258d31'
        assert hashing.ripemd160(b'abc').hex() == \
            '8eb208f7e05d987a9b044a8e98c6b087f15a0bfc'

    def test_hash160_is_ripemd160_of_sha256(self):
        data = b'some script'
        assert hashing.hash160(data) == hashing.ripemd160(hashing.sha256(data))

    def test_script_hash_is_deterministic_and_20_bytes(self):
        script = bytes.fromhex('21' + '02' * 33 + 'ac')
        first = hashing.script_hash(script)
        second = hashing.script_hash(bytes(bytearray(script)))
        assert first == second
        assert len(first) == 20
        assert hashing.script_hash(script + b'\x00') != first

    def test_hashing_rejects_non_bytes(self):
        with self.assertRaises(TypeError):
            hashing.sha256('abc')
        with self.assertRaises(TypeError):
            hashing.ripemd160('abc')


if __name__ == '__main__':
    unittest.main()
