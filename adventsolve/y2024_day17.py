"""Three-bit computer: run a program and find the value that makes it a quine."""

import re
from dataclasses import dataclass, field

_REGISTER = re.compile(r"Register ([ABC]): (-?\d+)")
_PROGRAM = re.compile(r"Program: ([\d,\s]+)")


def _trunc_div_pow2(value: int, shift: int) -> int:
    quotient = abs(value) >> shift
    return quotient if value >= 0 else -quotient


def _trunc_mod8(value: int) -> int:
    remainder = abs(value) % 8
    return remainder if value >= 0 else -remainder


@dataclass
class Machine:
    """Registers, program and output of the three-bit computer."""

    a: int
    b: int
    c: int
    program: tuple[int, ...]
    pc: int = 0
    output: list[int] = field(default_factory=list)

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand {operand}")

    def _step(self) -> None:
        if self.pc + 1 >= len(self.program):
            raise ValueError(f"missing operand at {self.pc}")
        op = self.program[self.pc]
        operand = self.program[self.pc + 1]
        if op == 0:
            self.a = _trunc_div_pow2(self.a, self._combo(operand))
        elif op == 1:
            self.b ^= operand
        elif op == 2:
            self.b = _trunc_mod8(self._combo(operand))
        elif op == 3:
            if self.a != 0:
                self.pc = operand
                return
        elif op == 4:
            self.b ^= self.c
        elif op == 5:
            self.output.append(_trunc_mod8(self._combo(operand)))
        elif op == 6:
            self.b = _trunc_div_pow2(self.a, self._combo(operand))
        elif op == 7:
            self.c = _trunc_div_pow2(self.a, self._combo(operand))
        else:
            raise ValueError(f"invalid opcode {op}")
        self.pc += 2

    def run(self) -> list[int]:
        """Execute until the program counter leaves the program; return output."""
        while self.pc < len(self.program):
            self._step()
        return list(self.output)


def parse_machine(text: str) -> Machine:
    """Parse the three registers and the program."""
    registers = {name: int(value) for name, value in _REGISTER.findall(text)}
    program = _PROGRAM.search(text)
    if set(registers) != {"A", "B", "C"} or program is None:
        raise ValueError("input needs registers A, B, C and a program")
    values = tuple(int(v) for v in program.group(1).replace(",", " ").split())
    return Machine(registers["A"], registers["B"], registers["C"], values)


def part1(text: str) -> str:
    """Comma-separated output of running the program."""
    return ",".join(str(v) for v in parse_machine(text).run())


def _output_for(program: tuple[int, ...], a: int) -> list[int]:
    return Machine(a, 0, 0, program).run()


def part2(text: str) -> int:
    """Lowest register A value that makes the program output itself."""
    program = parse_machine(text).program
    a = 1
    last_a = a
    while len(_output_for(program, a)) < len(program):
        last_a = a
        a *= 2
    a = last_a
    while _output_for(program, a) != list(program):
        a += 1
    return a