"""Framework assemblies and test directories probed for every run."""

from __future__ import annotations

from dataclasses import dataclass

TEST_DIRECTORIES: tuple[str, ...] = (
    "Interop",
    "JIT",
)

FRAMEWORK_ASSEMBLIES: tuple[str, ...] = (
    "mscorlib.dll",
    "System.dll",
    "System.Core.dll",
    "System.Runtime.dll",
    "System.Runtime.Extensions.dll",
    "System.Runtime.Handles.dll",
    "System.Runtime.InteropServices.dll",
    "System.Runtime.InteropServices.PInvoke.dll",
    "System.Runtime.InteropServices.RuntimeInformation.dll",
    "System.Runtime.Numerics.dll",
    "System.Runtime.Serialization.Primitives.dll",
    "Microsoft.CodeAnalysis.dll",
    "Microsoft.CodeAnalysis.CSharp.dll",
    "System.Collections.dll",
    "System.Collections.Immutable.dll",
    "System.Collections.ni.dll",
    "System.Collections.NonGeneric.dll",
    "System.Collections.Specialized.dll",
    "System.ComponentModel.dll",
    "System.Console.dll",
    "System.Numerics.Vectors.dll",
    "System.Text.Encoding.dll",
    "System.Text.Encoding.Extensions.dll",
    "System.Text.RegularExpressions.dll",
    "System.Xml.dll",
    "System.Xml.Linq.dll",
    "System.Xml.ReaderWriter.dll",
    "System.Xml.XDocument.dll",
    "System.Xml.XmlDocument.dll",
    "System.Xml.XmlSerializer.dll",
)


@dataclass(frozen=True)
class ReferenceInputs:
    """Ordered names probed under the core root and the test root."""

    framework_assemblies: tuple[str, ...] = FRAMEWORK_ASSEMBLIES
    test_directories: tuple[str, ...] = TEST_DIRECTORIES
