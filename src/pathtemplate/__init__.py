"""pathtemplate — match paths against ordered ``{placeholder}`` templates.

Resolves inbound paths to a template key plus bound values, and builds
outbound paths from a template and values.

Basic usage::

    from pathtemplate import TemplateRegistry

    registry = TemplateRegistry()  # the five default templates
    match = registry.match("/user/42/edit.json")
    if match is not None:
        match.key        # TemplateKey.EDIT
        match.bindings   # {"prefix": "user", "id": "42"}
        match.extension  # "json"

    registry.merge("show", {"prefix": "user", "id": "42"})  # "/user/42"
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_TEMPLATES",
    "CompiledTemplate",
    "ConfigurationError",
    "IncompleteMerge",
    "InvalidArgument",
    "InvalidInput",
    "InvalidTemplate",
    "InvalidTemplateKey",
    "MatchResult",
    "PathTemplateError",
    "Rule",
    "SplitPath",
    "Template",
    "TemplateConfig",
    "TemplateKey",
    "TemplateRegistry",
    "ValidationResult",
    "check_template",
    "compile_template",
    "compile_templates",
    "default_registry",
    "extract_extension",
    "get_default_template",
    "match_path",
    "merge_template",
    "validate_template",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_TEMPLATES": "pathtemplate.registry",
    "CompiledTemplate": "pathtemplate.template",
    "ConfigurationError": "pathtemplate.errors",
    "IncompleteMerge": "pathtemplate.errors",
    "InvalidArgument": "pathtemplate.errors",
    "InvalidInput": "pathtemplate.errors",
    "InvalidTemplate": "pathtemplate.errors",
    "InvalidTemplateKey": "pathtemplate.errors",
    "MatchResult": "pathtemplate.template",
    "PathTemplateError": "pathtemplate.errors",
    "Rule": "pathtemplate.validation",
    "SplitPath": "pathtemplate.extension",
    "Template": "pathtemplate.template",
    "TemplateConfig": "pathtemplate.config",
    "TemplateKey": "pathtemplate.template",
    "TemplateRegistry": "pathtemplate.registry",
    "ValidationResult": "pathtemplate.validation",
    "check_template": "pathtemplate.validation",
    "compile_template": "pathtemplate.compiler",
    "compile_templates": "pathtemplate.compiler",
    "default_registry": "pathtemplate.registry",
    "extract_extension": "pathtemplate.extension",
    "get_default_template": "pathtemplate.registry",
    "match_path": "pathtemplate.matcher",
    "merge_template": "pathtemplate.merge",
    "validate_template": "pathtemplate.validation",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathtemplate`` fast while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
