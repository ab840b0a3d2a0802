"""High-level orchestration for RFC document assembly.

This module coordinates one generation run: sequencing the configured
fragments, renumbering their headings while the table of contents accumulates,
wrapping each fragment in the navigation scaffold, rendering the README entry
document, and finally injecting the table of contents into its host fragment.
It exposes :class:`RFCAssembler`, which consumes an
:class:`~rfc_assembler.config.AssemblyConfig`.

Every artifact is rendered in memory before the first write, so configuration,
structural, and template errors leave the output tree untouched.

Example
-------
>>> from pathlib import Path
>>> from rfc_assembler.config import load_assembly_config
>>> from rfc_assembler.generator import RFCAssembler
>>> config = load_assembly_config(Path("rfcs.yaml"))  # doctest: +SKIP
>>> RFCAssembler(config).run()  # doctest: +SKIP
[PosixPath('/repo/README.md'), PosixPath('/repo/rfcs/toc.md'), ...]
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from rfc_assembler._constants import FRAGMENT_BODY_SLOT
from rfc_assembler.errors import ConfigurationError
from rfc_assembler.generator.models import Artifact
from rfc_assembler.generator.renderer import TemplateRenderer, literal_statements
from rfc_assembler.generator.toc import TocInjector
from rfc_assembler.generator.writer import OutputWriter
from rfc_assembler.renumber import HeadingRenumberer, TocBuffer
from rfc_assembler.sequencer import navigation, readme_template, sequence_fragments

if typ.TYPE_CHECKING:
    from rfc_assembler.config import AssemblyConfig
    from rfc_assembler.sequencer import FragmentDescriptor, NavigationLink

logger = logging.getLogger(__name__)

DEFAULT_SCAFFOLD = Path(__file__).resolve().parents[1] / "templates" / "fragment.md"


class RFCAssembler:
    """Assemble configured RFC fragments into a numbered document set."""

    def __init__(
        self,
        config: AssemblyConfig,
        *,
        scaffold_path: Path | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Validate the fragment set and prepare the pipeline stages.

        Parameters
        ----------
        config : AssemblyConfig
            Loaded configuration, including the project root.
        scaffold_path : Path, optional
            Navigation/attribution frame wrapped around each fragment; defaults
            to the packaged ``templates/fragment.md``. It must contain the
            ``%%FRAGMENT_BODY%%`` slot.
        renderer : TemplateRenderer, optional
            Renderer used for fragments and the README.

        Raises
        ------
        ConfigurationError
            If a fragment source or the README template is missing or does not
            use the ``.md`` extension, or if the scaffold lacks the fragment
            body slot.
        """
        self.config = config
        self.root = config.root
        self.fragments = sequence_fragments(config.main, config.rfcs, config.root)
        self.readme_template = readme_template(config.main, config.root)
        self.scaffold = _load_scaffold(scaffold_path or DEFAULT_SCAFFOLD)
        self.toc = TocBuffer()
        self.renumberer = HeadingRenumberer(
            self.toc,
            verbatim=config.main.verbatim,
            terminate_headings=config.main.terminate_headings,
        )
        self.renderer = renderer or TemplateRenderer()
        self.injector = TocInjector(config.main.toc_marker)
        self.writer = OutputWriter(config.root)

    @property
    def toc_host(self) -> FragmentDescriptor:
        """Return the fragment whose output receives the table of contents."""
        return self.fragments[0]

    def run(self) -> list[Path]:
        """Render, write, and link every artifact for this configuration.

        Returns
        -------
        list[Path]
            Written paths: the README first, then fragments in ordinal order.

        Raises
        ------
        StructuralError
            If a fragment's headings are malformed or the TOC host lacks the
            marker token.
        RenderError
            If a template references missing values or ignores supplied ones.
        OSError
            If a source cannot be read or an output cannot be written.
        """
        self.toc.reset()
        artifacts = [self._render_readme()]
        for fragment, (prev, following) in zip(
            self.fragments, navigation(self.fragments), strict=True
        ):
            artifacts.append(self._render_fragment(fragment, prev, following))

        host = self.toc_host
        host_artifact = next(item for item in artifacts if item.path == host.target)
        self.injector.ensure_marker(host_artifact.text, host.target)

        written = [self.writer.write(artifact) for artifact in artifacts]
        self.injector.rewrite(self.root / host.target, self.toc)
        return written

    def _render_readme(self) -> Artifact:
        """Render the entry document from the configured README template."""
        logger.info("Processing %s", self.readme_template)
        template = self._read(self.readme_template)
        text = self.renderer.render(
            template,
            {"templates": self.fragments, "config": self.config.main},
            name=self.readme_template,
        )
        return Artifact(path=self.config.main.readme, text=text)

    def _render_fragment(
        self,
        fragment: FragmentDescriptor,
        prev: NavigationLink,
        following: NavigationLink,
    ) -> Artifact:
        """Renumber one fragment and wrap it in the navigation scaffold."""
        logger.info("Processing %s", fragment.source)
        body = self.renumberer.renumber(fragment, self._read(fragment.source))
        template = self.scaffold.replace(
            FRAGMENT_BODY_SLOT, literal_statements(body), 1
        )
        text = self.renderer.render(
            template,
            {
                "prev": prev,
                "rfc": fragment,
                "next": following,
                "config": self.config.main,
            },
            name=fragment.source,
        )
        return Artifact(path=fragment.target, text=text)

    def _read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")


def _load_scaffold(path: Path) -> str:
    """Read the fragment scaffold and require its body slot."""
    scaffold = path.read_text(encoding="utf-8")
    if FRAGMENT_BODY_SLOT not in scaffold:
        msg = (
            f"Scaffold '{path}' has no {FRAGMENT_BODY_SLOT} slot for the "
            "fragment body"
        )
        raise ConfigurationError(msg)
    return scaffold


__all__ = ["RFCAssembler"]
