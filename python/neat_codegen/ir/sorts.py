"""Sort enumerations and flag sets of the module-interface format."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag


class DeclSort(Enum):
    """Partitions a declaration index can point into."""

    VendorExtension = 0
    Enumerator = 1
    Variable = 2
    Parameter = 3
    Field = 4
    Bitfield = 5
    Scope = 6
    Enumeration = 7
    Alias = 8
    Temploid = 9
    Template = 10
    PartialSpecialization = 11
    ExplicitSpecialization = 12
    ExplicitInstantiation = 13
    Concept = 14
    Function = 15
    Method = 16
    Constructor = 17
    InheritedConstructor = 18
    Destructor = 19
    Reference = 20
    UsingDeclaration = 21
    UsingDirective = 22
    Friend = 23
    Expansion = 24
    DeductionGuide = 25
    Barren = 26
    Tuple = 27
    SyntaxTree = 28
    Intrinsic = 29
    Property = 30
    OutputSegment = 31


class TypeSort(Enum):
    """Partitions a type index can point into."""

    VendorExtension = 0
    Fundamental = 1
    Designated = 2
    Tor = 3
    Syntactic = 4
    Expansion = 5
    Pointer = 6
    PointerToMember = 7
    LvalueReference = 8
    RvalueReference = 9
    Function = 10
    Method = 11
    Array = 12
    Typename = 13
    Qualified = 14
    Base = 15
    Decltype = 16
    Placeholder = 17
    Tuple = 18
    Forall = 19
    Unaligned = 20
    SyntaxTree = 21


class ExprSort(Enum):
    """The expression partitions this tool distinguishes."""

    VendorExtension = 0
    Empty = 1
    Literal = 2
    Lambda = 3
    Type = 4
    NamedDecl = 5
    UnresolvedId = 6
    TemplateId = 7
    UnqualifiedId = 8
    SimpleIdentifier = 9
    Pointer = 10
    QualifiedName = 11
    Path = 12
    Read = 13
    Monad = 14
    Dyad = 15
    Call = 16


class NameSort(Enum):
    """Partitions a name index can point into."""

    Identifier = 0
    Operator = 1
    Conversion = 2
    Literal = 3
    Template = 4
    Specialization = 5
    SourceFile = 6
    Guide = 7


class UnitSort(Enum):
    """The kind of translation unit an interface was produced from."""

    Source = 0
    Primary = 1
    Partition = 2
    Header = 3
    ExportedTU = 4


class TypeBasis(Enum):
    """Fundamental type bases and scope kinds."""

    Void = 0
    Bool = 1
    Char = 2
    Wchar_t = 3
    Int = 4
    Float = 5
    Double = 6
    Nullptr = 7
    Ellipsis = 8
    SegmentType = 9
    Class = 10
    Struct = 11
    Union = 12
    Enum = 13
    Typename = 14
    Namespace = 15
    Interface = 16
    Function = 17
    Empty = 18
    VariableTemplate = 19
    Concept = 20
    Auto = 21
    DecltypeAuto = 22
    Overload = 23


class TypePrecision(Enum):
    """Bit precision of a fundamental type."""

    Default = 0
    Short = 1
    Long = 2
    Bit8 = 3
    Bit16 = 4
    Bit32 = 5
    Bit64 = 6
    Bit128 = 7


class TypeSign(Enum):
    """Signedness of a fundamental type."""

    Plain = 0
    Signed = 1
    Unsigned = 2


class Access(IntEnum):
    """Member access. ``None_`` means no access was written down."""

    None_ = 0
    Private = 1
    Protected = 2
    Public = 3


class Qualifiers(IntFlag):
    """cv-qualifiers plus ``restrict``."""

    None_ = 0
    Const = 1
    Volatile = 2
    Restrict = 4


class BasicSpecifiers(IntFlag):
    """Basic declaration specifiers; only the export bit matters here."""

    Cxx = 0
    C = 1
    Internal = 2
    Vague = 4
    External = 8
    Deprecated = 16
    InitializedInClass = 32
    NonExported = 64
    IsMemberOfGlobalModule = 128


class BaseSpecifiers(IntFlag):
    """Specifiers attached to a base-class type."""

    None_ = 0
    Shared = 1
    Expanded = 2
