"""Map handler identifiers to candidate source files in the deployment bundle."""

from typing import List

from .specs import RuntimeSpec

DEFAULT_DEPLOYMENT_ROOT = "/var/task"


def remove_path_method_name(handler: str) -> str:
    """Strip the method from a dotted handler and turn the rest into a path.

    Every ``.`` separates segments, so ``src.test.index.handler`` becomes
    ``src/test/index``. A handler without a method yields ``""``.
    """
    segments = handler.split(".")
    return "/".join(segments[:-1])


def remove_path_method_name_node(handler: str) -> str:
    """Strip the method from a Node handler.

    The directory prefix is kept as written and the basename is cut at its
    first ``.``, so ``src/my-handler.test.handler`` becomes ``src/my-handler``.
    """
    prefix, slash, basename = handler.rpartition("/")
    module = basename.split(".")[0]
    return f"{prefix}{slash}{module}"


def path_formatter(
    function_handler: str,
    file_type: str,
    deployment_root: str = DEFAULT_DEPLOYMENT_ROOT,
) -> str:
    """Build ``<deployment_root>/<function_handler>.<file_type>``."""
    return f"{deployment_root}/{function_handler}.{file_type}"


class HandlerResolver:
    """Resolve handler identifiers against a deployment root.

    Pure string work; nothing here touches the filesystem.
    """

    def __init__(self, deployment_root: str = DEFAULT_DEPLOYMENT_ROOT):
        """Initialize resolver.

        Args:
            deployment_root: Directory the function bundle is unpacked into,
                without a trailing separator
        """
        self.deployment_root = deployment_root

    def split(self, spec: RuntimeSpec, handler: str) -> str:
        """Apply the runtime's splitting rule to a handler identifier."""
        if spec.split_style == "node":
            return remove_path_method_name_node(handler)
        return remove_path_method_name(handler)

    def candidate_paths(self, spec: RuntimeSpec, handler: str) -> List[str]:
        """Candidate source files for a handler, in preference order.

        Node probes ``js``, ``cjs`` and ``mjs``; other runtimes probe their
        single file type.
        """
        module_path = self.split(spec, handler)
        extensions = spec.extensions or (spec.file_type,)
        return [
            path_formatter(module_path, ext, self.deployment_root)
            for ext in extensions
        ]
