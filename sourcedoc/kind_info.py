"""Static display metadata for every known declaration kind."""

from dataclasses import dataclass

from sourcedoc.kind import Kind


@dataclass(frozen=True)
class KindInfo:
    """Display metadata attached to one kind."""

    name: str | None  # None means "not documentable"
    dash: str  # Docset category label
    url: str | None = None  # URL segment when it differs from name
    is_global: bool = False  # Own page with separate global declarations


# Order matters: Type.all() and the top-level category index follow it.
KIND_TABLE: dict[str, KindInfo] = {
    k.value: info
    for k, info in (
        # Markdown
        (Kind.MARKDOWN, KindInfo("Guide", "Guide")),
        # Group/Overview
        (Kind.OVERVIEW, KindInfo(None, "Section")),
        # Objective-C
        (Kind.OBJC_UNEXPOSED, KindInfo("Unexposed", "Unexposed")),
        (Kind.OBJC_CATEGORY, KindInfo("Category", "Extension", is_global=True)),
        (Kind.OBJC_CLASS, KindInfo("Class", "Class", is_global=True)),
        (Kind.OBJC_CONSTANT, KindInfo("Constant", "Constant", is_global=True)),
        (Kind.OBJC_ENUM, KindInfo("Enumeration", "Enum", "Enum", is_global=True)),
        (Kind.OBJC_ENUM_CASE, KindInfo("Enumeration Case", "Case")),
        (Kind.OBJC_INITIALIZER, KindInfo("Initializer", "Initializer")),
        (Kind.OBJC_CLASS_METHOD, KindInfo("Class Method", "Method")),
        (Kind.OBJC_INSTANCE_METHOD, KindInfo("Instance Method", "Method")),
        (Kind.OBJC_PROPERTY, KindInfo("Property", "Property")),
        (Kind.OBJC_PROTOCOL, KindInfo("Protocol", "Protocol", is_global=True)),
        (Kind.OBJC_TYPEDEF, KindInfo("Type Definition", "Type", is_global=True)),
        (Kind.OBJC_MARK, KindInfo("Mark", "Mark")),
        (Kind.OBJC_FUNCTION, KindInfo("Function", "Function", is_global=True)),
        (Kind.OBJC_STRUCT, KindInfo("Structure", "Struct", "Struct", is_global=True)),
        (Kind.OBJC_UNION, KindInfo("Union", "Union", is_global=True)),
        (Kind.OBJC_FIELD, KindInfo("Field", "Field")),
        (Kind.OBJC_IVAR, KindInfo("Instance Variable", "Ivar")),
        (Kind.OBJC_MODULE_IMPORT, KindInfo("Module", "Module")),
        # Swift
        (Kind.SWIFT_ACTOR, KindInfo("Actor", "Actor", is_global=True)),
        (Kind.SWIFT_ADDRESSOR, KindInfo("Addressor", "Function")),
        (Kind.SWIFT_DIDSET, KindInfo("didSet Observer", "Function")),
        (Kind.SWIFT_GETTER, KindInfo("Getter", "Function")),
        (Kind.SWIFT_MUTABLE_ADDRESSOR, KindInfo("Mutable Addressor", "Function")),
        (Kind.SWIFT_SETTER, KindInfo("Setter", "Function")),
        (Kind.SWIFT_WILLSET, KindInfo("willSet Observer", "Function")),
        (Kind.SWIFT_OPERATOR, KindInfo("Operator", "Function")),
        (Kind.SWIFT_INFIX_OPERATOR, KindInfo("Infix Operator", "Function")),
        (Kind.SWIFT_POSTFIX_OPERATOR, KindInfo("Postfix Operator", "Function")),
        (Kind.SWIFT_PREFIX_OPERATOR, KindInfo("Prefix Operator", "Function")),
        (Kind.SWIFT_CLASS_METHOD, KindInfo("Class Method", "Method")),
        (Kind.SWIFT_CLASS_VARIABLE, KindInfo("Class Variable", "Variable")),
        (Kind.SWIFT_CLASS, KindInfo("Class", "Class", is_global=True)),
        (Kind.SWIFT_CONSTRUCTOR, KindInfo("Initializer", "Constructor")),
        (Kind.SWIFT_DESTRUCTOR, KindInfo("Deinitializer", "Method")),
        (
            Kind.SWIFT_GLOBAL_VARIABLE,
            KindInfo("Global Variable", "Global", is_global=True),
        ),
        (Kind.SWIFT_ENUM_CASE, KindInfo("Enumeration Case", "Case")),
        (Kind.SWIFT_ENUM_ELEMENT, KindInfo("Enumeration Element", "Element")),
        (Kind.SWIFT_ENUM, KindInfo("Enumeration", "Enum", "Enum", is_global=True)),
        (Kind.SWIFT_EXTENSION, KindInfo("Extension", "Extension", is_global=True)),
        (
            Kind.SWIFT_CLASS_EXTENSION,
            KindInfo("Class Extension", "Extension", is_global=True),
        ),
        (
            Kind.SWIFT_ENUM_EXTENSION,
            KindInfo("Enumeration Extension", "Extension", is_global=True),
        ),
        (
            Kind.SWIFT_PROTOCOL_EXTENSION,
            KindInfo("Protocol Extension", "Extension", is_global=True),
        ),
        (
            Kind.SWIFT_STRUCT_EXTENSION,
            KindInfo("Structure Extension", "Extension", is_global=True),
        ),
        (Kind.SWIFT_FREE_FUNCTION, KindInfo("Function", "Function", is_global=True)),
        (Kind.SWIFT_INSTANCE_METHOD, KindInfo("Instance Method", "Method")),
        (Kind.SWIFT_INSTANCE_VARIABLE, KindInfo("Instance Variable", "Property")),
        (Kind.SWIFT_LOCAL_VARIABLE, KindInfo("Local Variable", "Variable")),
        (Kind.SWIFT_PARAMETER, KindInfo("Parameter", "Parameter")),
        (Kind.SWIFT_PROTOCOL, KindInfo("Protocol", "Protocol", is_global=True)),
        (Kind.SWIFT_STATIC_METHOD, KindInfo("Static Method", "Method")),
        (Kind.SWIFT_STATIC_VARIABLE, KindInfo("Static Variable", "Variable")),
        (Kind.SWIFT_STRUCT, KindInfo("Structure", "Struct", "Struct", is_global=True)),
        (Kind.SWIFT_SUBSCRIPT, KindInfo("Subscript", "Method")),
        (
            Kind.SWIFT_TYPEALIAS,
            KindInfo("Type Alias", "Alias", "Typealias", is_global=True),
        ),
        (
            Kind.SWIFT_GENERIC_TYPE_PARAM,
            KindInfo("Generic Type Parameter", "Parameter"),
        ),
        (Kind.SWIFT_ASSOCIATED_TYPE, KindInfo("Associated Type", "Alias")),
        (Kind.SWIFT_MACRO, KindInfo("Macro", "Macro")),
    )
}
