"""Raw declaration kind identifiers emitted by the introspection tool."""

from enum import Enum


class Kind(str, Enum):
    """Every kind string the taxonomy knows about.

    Members compare equal to their raw string, so a record's ``kind`` value can
    be checked against them directly.
    """

    # Synthetic
    MARKDOWN = "document.markdown"
    OVERVIEW = "Overview"

    # Objective-C
    OBJC_UNEXPOSED = "sourcekitten.source.lang.objc.decl.unexposed"
    OBJC_CATEGORY = "sourcekitten.source.lang.objc.decl.category"
    OBJC_CLASS = "sourcekitten.source.lang.objc.decl.class"
    OBJC_CONSTANT = "sourcekitten.source.lang.objc.decl.constant"
    OBJC_ENUM = "sourcekitten.source.lang.objc.decl.enum"
    OBJC_ENUM_CASE = "sourcekitten.source.lang.objc.decl.enumcase"
    OBJC_INITIALIZER = "sourcekitten.source.lang.objc.decl.initializer"
    OBJC_CLASS_METHOD = "sourcekitten.source.lang.objc.decl.method.class"
    OBJC_INSTANCE_METHOD = "sourcekitten.source.lang.objc.decl.method.instance"
    OBJC_PROPERTY = "sourcekitten.source.lang.objc.decl.property"
    OBJC_PROTOCOL = "sourcekitten.source.lang.objc.decl.protocol"
    OBJC_TYPEDEF = "sourcekitten.source.lang.objc.decl.typedef"
    OBJC_MARK = "sourcekitten.source.lang.objc.mark"
    OBJC_FUNCTION = "sourcekitten.source.lang.objc.decl.function"
    OBJC_STRUCT = "sourcekitten.source.lang.objc.decl.struct"
    OBJC_UNION = "sourcekitten.source.lang.objc.decl.union"
    OBJC_FIELD = "sourcekitten.source.lang.objc.decl.field"
    OBJC_IVAR = "sourcekitten.source.lang.objc.decl.ivar"
    OBJC_MODULE_IMPORT = "sourcekitten.source.lang.objc.module.import"

    # Swift
    SWIFT_ACTOR = "source.lang.swift.decl.actor"
    SWIFT_ADDRESSOR = "source.lang.swift.decl.function.accessor.address"
    SWIFT_DIDSET = "source.lang.swift.decl.function.accessor.didset"
    SWIFT_GETTER = "source.lang.swift.decl.function.accessor.getter"
    SWIFT_MUTABLE_ADDRESSOR = "source.lang.swift.decl.function.accessor.mutableaddress"
    SWIFT_SETTER = "source.lang.swift.decl.function.accessor.setter"
    SWIFT_WILLSET = "source.lang.swift.decl.function.accessor.willset"
    SWIFT_OPERATOR = "source.lang.swift.decl.function.operator"
    SWIFT_INFIX_OPERATOR = "source.lang.swift.decl.function.operator.infix"
    SWIFT_POSTFIX_OPERATOR = "source.lang.swift.decl.function.operator.postfix"
    SWIFT_PREFIX_OPERATOR = "source.lang.swift.decl.function.operator.prefix"
    SWIFT_CLASS_METHOD = "source.lang.swift.decl.function.method.class"
    SWIFT_CLASS_VARIABLE = "source.lang.swift.decl.var.class"
    SWIFT_CLASS = "source.lang.swift.decl.class"
    SWIFT_CONSTRUCTOR = "source.lang.swift.decl.function.constructor"
    SWIFT_DESTRUCTOR = "source.lang.swift.decl.function.destructor"
    SWIFT_GLOBAL_VARIABLE = "source.lang.swift.decl.var.global"
    SWIFT_ENUM_CASE = "source.lang.swift.decl.enumcase"
    SWIFT_ENUM_ELEMENT = "source.lang.swift.decl.enumelement"
    SWIFT_ENUM = "source.lang.swift.decl.enum"
    SWIFT_EXTENSION = "source.lang.swift.decl.extension"
    SWIFT_CLASS_EXTENSION = "source.lang.swift.decl.extension.class"
    SWIFT_ENUM_EXTENSION = "source.lang.swift.decl.extension.enum"
    SWIFT_PROTOCOL_EXTENSION = "source.lang.swift.decl.extension.protocol"
    SWIFT_STRUCT_EXTENSION = "source.lang.swift.decl.extension.struct"
    SWIFT_FREE_FUNCTION = "source.lang.swift.decl.function.free"
    SWIFT_INSTANCE_METHOD = "source.lang.swift.decl.function.method.instance"
    SWIFT_INSTANCE_VARIABLE = "source.lang.swift.decl.var.instance"
    SWIFT_LOCAL_VARIABLE = "source.lang.swift.decl.var.local"
    SWIFT_PARAMETER = "source.lang.swift.decl.var.parameter"
    SWIFT_PROTOCOL = "source.lang.swift.decl.protocol"
    SWIFT_STATIC_METHOD = "source.lang.swift.decl.function.method.static"
    SWIFT_STATIC_VARIABLE = "source.lang.swift.decl.var.static"
    SWIFT_STRUCT = "source.lang.swift.decl.struct"
    SWIFT_SUBSCRIPT = "source.lang.swift.decl.function.subscript"
    SWIFT_TYPEALIAS = "source.lang.swift.decl.typealias"
    SWIFT_GENERIC_TYPE_PARAM = "source.lang.swift.decl.generic_type_param"
    SWIFT_ASSOCIATED_TYPE = "source.lang.swift.decl.associatedtype"
    SWIFT_MACRO = "source.lang.swift.decl.macro"
    SWIFT_MARK = "source.lang.swift.syntaxtype.comment.mark"


# Prefixes of kinds that describe an actual declaration (as opposed to
# comments, imports or synthetic nodes).
DECLARATION_PREFIXES = (
    "source.lang.swift.decl",
    "sourcekitten.source.lang.objc.decl",
)

SWIFT_EXTENSIBLE_KINDS = frozenset(
    k.value
    for k in (
        Kind.SWIFT_CLASS,
        Kind.SWIFT_STRUCT,
        Kind.SWIFT_PROTOCOL,
        Kind.SWIFT_ENUM,
        Kind.SWIFT_ACTOR,
    )
)

# Kind-specific extensions and the primary kinds they can extend.
EXTENSION_BASE_KINDS: dict[str, frozenset[str]] = {
    Kind.SWIFT_CLASS_EXTENSION.value: frozenset(
        {Kind.SWIFT_CLASS.value, Kind.SWIFT_ACTOR.value}
    ),
    Kind.SWIFT_ENUM_EXTENSION.value: frozenset({Kind.SWIFT_ENUM.value}),
    Kind.SWIFT_PROTOCOL_EXTENSION.value: frozenset({Kind.SWIFT_PROTOCOL.value}),
    Kind.SWIFT_STRUCT_EXTENSION.value: frozenset({Kind.SWIFT_STRUCT.value}),
}
