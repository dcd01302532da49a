"""Jinja2 integration — the ``{% model_input %}`` tag and template global.

Template usage::

    {% model_input "User", "email", {"label_text": "E-mail", "attributes": {"autofocus": true}} %}
    {{ model_input("User", "email") }}

Tag arguments are ordinary Jinja expressions, so options are evaluated by
the (sandboxed) template engine rather than by Python.
"""

from __future__ import annotations

from typing import Any

from jinja2 import nodes, select_autoescape
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup

from model_input.exceptions import ModelInputError
from model_input.generator import InputGenerator


class ModelInputExtension(Extension):
    """Adds the ``model_input`` tag to a Jinja2 environment.

    The generator is read from ``environment.model_input_generator``; assign
    it after creating the environment or use :func:`create_environment`.
    """

    tags = {"model_input"}

    def __init__(self, environment: Any) -> None:
        super().__init__(environment)
        environment.extend(model_input_generator=None)

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        args: list[nodes.Expr] = [parser.parse_expression()]
        parser.stream.expect("comma")
        args.append(parser.parse_expression())
        if parser.stream.skip_if("comma"):
            args.append(parser.parse_expression())
        else:
            args.append(nodes.Const(None))
        call = self.call_method("_render", args, lineno=lineno)
        return nodes.Output([call], lineno=lineno)

    def _render(self, model: str, field: str, options: Any = None) -> Markup:
        generator: InputGenerator | None = getattr(self.environment, "model_input_generator", None)
        if generator is None:
            raise ModelInputError("No InputGenerator configured; set environment.model_input_generator")
        return generator.render(model, field, options)


def create_environment(generator: InputGenerator, **kwargs: Any) -> SandboxedEnvironment:
    """Create a sandboxed Jinja2 environment with the ``model_input`` tag installed.

    Autoescape defaults to HTML templates. Extra keyword arguments are passed
    to :class:`SandboxedEnvironment`.
    """
    extensions = list(kwargs.pop("extensions", []))
    extensions.append(ModelInputExtension)
    kwargs.setdefault("autoescape", select_autoescape(["html", "html.j2"], default_for_string=True))
    env = SandboxedEnvironment(extensions=extensions, **kwargs)
    env.model_input_generator = generator  # type: ignore[attr-defined]
    env.globals["model_input"] = generator.render
    return env
