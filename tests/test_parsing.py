from context import builder, errors, opcodes, parsing, verification
import unittest


OpCode = opcodes.OpCode


class TestParsing(unittest.TestCase):
    def test_read_instructions(self):
        script = (
            builder.ScriptBuilder()
            .emit_push_integer(2)
            .emit_push_data(b'\xab' * 100)
            .emit_sys_call('Neo.Runtime.Log')
            .emit_opcode(OpCode.RET)
            .finish()
        )
        assert parsing.read_instructions(script) == [
            (OpCode.PUSH2, b''),
            (OpCode.PUSHDATA1, b'\xab' * 100),
            (OpCode.SYSCALL, b'Neo.Runtime.Log'),
            (OpCode.RET, b''),
        ]

    def test_read_instructions_rejects_truncated_and_unknown(self):
        with self.assertRaises(errors.DecodeFailure):
            parsing.read_instructions(b'\x21' + b'\x02' * 32)
        with self.assertRaises(errors.DecodeFailure):
            parsing.read_instructions(b'\x4d\x00\x01' + b'\x00' * 255)
        with self.assertRaises(errors.DecodeFailure):
            parsing.read_instructions(b'\x67' + b'\x00' * 19)
        with self.assertRaises(errors.DecodeFailure):
            parsing.read_instructions(b'\x50')

    def test_push_integer_value(self):
        for n in [-1, 0, 1, 16, 17, 1024]:
            script = builder.ScriptBuilder().emit_push_integer(n).finish()
            [(op, operand)] = parsing.read_instructions(script)
            assert parsing.push_integer_value(op, operand) == n
        assert parsing.push_integer_value(OpCode.CHECKSIG, b'') is None

    def test_disassemble_single_sig_script(self):
        key = b'\x02' + b'\x11' * 32
        lines = parsing.disassemble(verification.make_single_sig_script(key))
        assert lines == [f'PUSHBYTES33 x{key.hex()}', 'CHECKSIG']

    def test_disassemble_multisig_script(self):
        keys = [b'\x02' + bytes([i]) * 32 for i in range(3)]
        lines = parsing.disassemble(verification.make_multisig_script(2, keys))
        assert lines == [
            'PUSH2',
            *[f'PUSHBYTES33 x{k.hex()}' for k in keys],
            'PUSH3',
            'CHECKMULTISIG',
        ]

    def test_disassemble_calls_and_jumps(self):
        target = bytes(range(20))
        script = (
            builder.ScriptBuilder()
            .emit_sys_call('Neo.Storage.Get')
            .emit_app_call(target)
            .emit_tail_call(target)
            .finish()
        ) + b'\x62\xfe\xff' + b'\x00'
        assert parsing.disassemble(script) == [
            'SYSCALL Neo.Storage.Get',
            f'APPCALL x{target.hex()}',
            f'TAILCALL x{target.hex()}',
            'JMP -2',
            'PUSH0',
        ]


if __name__ == '__main__':
    unittest.main()
