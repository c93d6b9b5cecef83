"""Unit tests for RenderContext."""

from __future__ import annotations

import pytest

from quire import RenderContext


def _block(r):
    r.p("block")


class TestRenderContext:
    def test_defaults(self) -> None:
        ctx = RenderContext()
        assert ctx.namespace == {}
        assert ctx.inner_block is None

    def test_namespaces_are_independent(self) -> None:
        a, b = RenderContext(), RenderContext()
        a.namespace["x"] = 1
        assert b.namespace == {}

    def test_namespace_keeps_insertion_order(self) -> None:
        ctx = RenderContext()
        for key in "zyx":
            ctx.namespace[key] = key
        assert list(ctx.namespace) == ["z", "y", "x"]


class TestBound:
    def test_binds_and_restores(self) -> None:
        ctx = RenderContext()
        with ctx.bound(_block) as bound:
            assert bound is ctx
            assert ctx.inner_block is _block
        assert ctx.inner_block is None

    def test_nested_bindings(self) -> None:
        def other(r):
            pass

        ctx = RenderContext(inner_block=_block)
        with ctx.bound(other):
            with ctx.bound(None):
                assert ctx.inner_block is None
            assert ctx.inner_block is other
        assert ctx.inner_block is _block

    def test_restores_on_error(self) -> None:
        ctx = RenderContext()
        with pytest.raises(RuntimeError), ctx.bound(_block):
            raise RuntimeError("boom")
        assert ctx.inner_block is None
