"""
Tests for the solve-DSL entry points: compute, block, define, expand.
"""

import numpy as np
import pytest

from arcjump.dsl import (
    InvalidExpressionError,
    JumpBlock,
    block,
    compute,
    define,
    expand,
)
from arcjump.errors import ResolverError
from arcjump.kinds import ParameterKind

JUMP_HEIGHT = 20.0
JUMP_TIME = 10.0


class TestCompute:
    """Expression form, evaluated in the caller's scope."""

    def test_two_outputs(self):
        h, t = 20.0, 10.0
        impulse, gravity = compute("H(h), T(t) => I, G")
        assert impulse == 4.0
        assert gravity == -0.4

    @pytest.mark.parametrize("h,t", [(20.0, 10.0), (1.0, 0.5), (7.5, 3.0), (-2.0, 4.0)])
    def test_height_time_formula(self, h, t):
        impulse, gravity = compute("H(h), T(t) => I, G")
        assert abs(impulse - 2 * h / t) < 1e-12
        assert abs(gravity - (-2 * h / t ** 2)) < 1e-12

    def test_single_output_is_a_scalar(self):
        h, v = 10.0, 4.0
        gravity = compute("H(h), I(v) => G")
        assert abs(gravity + 0.8) < 1e-12

    def test_long_spellings_and_input_order(self):
        h, t = 20.0, 10.0
        assert compute("Time(t), Height(h) => Impulse") == 4.0

    def test_annotation_form(self):
        h, t = 20.0, 10.0
        assert compute("h: H, t: Time => I") == 4.0

    def test_expression_operands(self):
        h, t = 10.0, 10.0
        assert compute("H(h * 2), T(t) => I") == 4.0
        assert compute("h + 10.0 : H, t : T => I") == 4.0

    def test_module_globals_are_visible(self):
        assert compute("H(JUMP_HEIGHT), T(JUMP_TIME) => I") == 4.0

    def test_explicit_namespace(self):
        result = compute("H(x), T(y) => G", {"x": 20.0, "y": 10.0})
        assert result == -0.4

    def test_f32_values_stay_f32(self):
        h, t = np.float32(20), np.float32(10)
        impulse, gravity = compute("H(h), T(t) => I, G")
        assert isinstance(impulse, np.float32)
        assert gravity == np.float32(-0.4)

    def test_as_width_casts_inputs(self):
        h, t = 20.0, 10.0
        impulse, gravity = compute("H(h), T(t) => I, G as f32")
        assert isinstance(impulse, np.float32)
        assert isinstance(gravity, np.float32)
        assert gravity == np.float32(-0.4)

    def test_inputs_evaluated_once(self):
        calls = []

        def height():
            calls.append(1)
            return 20.0

        t = 10.0
        compute("H(height()), T(t) => I, G")
        assert len(calls) == 1

    def test_resolver_error_propagates(self):
        h = 20.0
        with pytest.raises(ResolverError) as info:
            compute("H(h), T(0.0) => I")
        assert info.value.parameter is ParameterKind.TIME

    def test_first_failure_wins(self):
        """Outputs are computed left to right; the first error surfaces."""
        h, v = 0.0, 0.0
        with pytest.raises(ResolverError) as info:
            compute("H(h), I(v) => G, T")
        assert info.value.parameter is ParameterKind.HEIGHT
        with pytest.raises(ResolverError) as info:
            compute("H(h), I(v) => T, G")
        assert info.value.parameter is ParameterKind.IMPULSE

    def test_multiline_operand(self):
        h, t = 10.0, 10.0
        result = compute("""
            H(h
              + 10.0),
            T(t) => I
        """)
        assert result == 4.0

    def test_generator_operand_sees_caller_locals(self):
        scale = 2.0
        heights = [10.0]
        t = 10.0
        assert compute("H(sum(h * scale for h in heights)), T(t) => I") == 4.0

    def test_lambda_operand_sees_caller_locals(self):
        h, t = 20.0, 10.0
        assert compute("H((lambda: h)()), T(t) => I") == 4.0

    def test_undefined_name(self):
        with pytest.raises(NameError):
            compute("H(undefined_height), T(1.0) => I")


class TestBlock:
    """Declaration blocks with named outputs."""

    def test_bindings_in_order(self):
        jump = block("""
            H(height), T(time) => v: I, g: G;
            I(v), G(g) => peak: H;
        """)
        assert isinstance(jump, JumpBlock)
        assert jump.names == ("v", "g", "peak")
        values = jump.evaluate(height=20.0, time=10.0)
        assert list(values) == ["v", "g", "peak"]
        assert values["v"] == 4.0
        assert abs(values["peak"] - 20.0) < 1e-9

    def test_preamble_width(self):
        jump = block("""
            use f32;
            H(height), T(time) => v: I, g: G;
        """)
        assert jump.width == "f32"
        assert not jump.is_const
        values = jump.evaluate({"height": 20.0, "time": 10.0})
        assert isinstance(values["v"], np.float32)
        assert values["g"] == np.float32(-0.4)

    def test_statement_width_overrides_preamble(self):
        values = block("""
            use f32;
            H(height), T(time) => v: I as f64;
        """).evaluate(height=20.0, time=10.0)
        assert isinstance(values["v"], np.float64)

    def test_values_override_namespace(self):
        jump = block("H(height), T(time) => v: I")
        values = jump.evaluate({"height": 1.0, "time": 10.0}, height=20.0)
        assert values["v"] == 4.0

    def test_generator_operand_sees_values(self):
        values = block("H(sum(x * k for x in hs)), T(t) => v: I").evaluate(
            hs=[10.0], k=2.0, t=10.0)
        assert values["v"] == 4.0

    def test_output_reuses_input_name(self):
        values = block("H(h), T(t) => h: I, g: G").evaluate(h=20.0, t=10.0)
        assert values["h"] == 4.0
        assert values["g"] == -0.4

    def test_first_statement_on_opening_line(self):
        jump = block("""H(height), T(time) => v: I;
            I(v), T(time) => g: G;
        """)
        values = jump.evaluate(height=20.0, time=10.0)
        assert values["v"] == 4.0
        assert values["g"] == -0.4

    def test_uneven_indentation(self):
        values = block("""
            use f64;
                H(height), T(time) => v: I;
          I(v), T(time) => g: G;
        """).evaluate(height=20.0, time=10.0)
        assert values["g"] == -0.4

    def test_compiled_once(self):
        source = "H(height), T(time) => v: I"
        assert block(source) is block(source)

    def test_const_block_rejects_calls(self):
        with pytest.raises(InvalidExpressionError):
            block("use const f32; H(float(height)), T(time) => v: I")

    def test_const_block_accepts_arithmetic(self):
        jump = block("use const f64; H(2 * HEIGHT + 1.5), T(-TIME) => v: I")
        assert jump.is_const


class TestDefine:
    """Load-time evaluation into a namespace."""

    def test_into_namespace(self):
        namespace = {"JUMP_HEIGHT": 20.0, "JUMP_TIME": 10.0}
        bindings = define("""
            use const f64;
            H(JUMP_HEIGHT), T(JUMP_TIME) => JUMP_IMPULSE: I, JUMP_GRAVITY: G;
        """, namespace)
        assert bindings == {"JUMP_IMPULSE": 4.0, "JUMP_GRAVITY": -0.4}
        assert namespace["JUMP_IMPULSE"] == 4.0
        assert namespace["JUMP_GRAVITY"] == -0.4

    def test_into_caller_globals(self):
        try:
            define("use const f32; H(JUMP_HEIGHT), T(JUMP_TIME) => DEFINED_IMPULSE: I")
            assert globals()["DEFINED_IMPULSE"] == np.float32(4.0)
        finally:
            globals().pop("DEFINED_IMPULSE", None)


class TestExpand:
    """Generated source."""

    def test_identifiers_used_verbatim(self):
        source = expand("T(t), H(h) => I")
        assert "__jump_resolver.impulse_from_height_and_time(h, t)" in source

    def test_expressions_bound_once(self):
        source = expand("H(h * 2), T(t) => I, G")
        assert source.count("(h * 2)") == 1
        assert "__jump_height_0 = (h * 2)" in source
        assert "impulse_from_height_and_time(__jump_height_0, t)" in source
        assert "gravity_from_height_and_time(__jump_height_0, t)" in source

    def test_enforced_width_casts(self):
        source = expand("H(h), T(t) => I as f32")
        assert "__jump_f32((h))" in source
        assert "__jump_f32((t))" in source

    def test_block_mode(self):
        source = expand("H(h), T(t) => v: I", mode="block")
        assert "v = __jump_resolver.impulse_from_height_and_time(h, t)" in source

    def test_block_outputs_bound_together(self):
        source = expand("H(h), T(t) => v: I, g: G", mode="block")
        assert "v, g = (__jump_resolver.impulse_from_height_and_time(h, t)," in source

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            expand("H(h), T(t) => I", mode="macro")
