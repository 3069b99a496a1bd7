"""Build class, style, and attribute values in a few lines — zero deps."""

from tessera import AttributeBuilder, ClassBuilder, StyleBuilder

print(ClassBuilder("btn").add_if(True, "active").build())
print(StyleBuilder().add("width", 50.5, "%").add("color", "red").build())
print(AttributeBuilder().add("type", "button").add("disabled").build())
