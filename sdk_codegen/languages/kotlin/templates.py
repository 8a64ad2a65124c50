"""In-memory Jinja templates for Kotlin output."""

FILE_HEADER = """\
{{ i0 }}// NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}package {{ package }}.{{ api_package }}

{{ i0 }}import {{ package }}.rtl.*
{{ i0 }}import java.time.Instant
{{ i0 }}import java.util.Date
"""

METHODS_PROLOGUE = FILE_HEADER + """
{{ i0 }}class {{ sdk_class }}(authSession: AuthSession) : APIMethods(authSession) {
"""

GET_SET = """\
{{ i0 }}var {{ name }}: {{ native }}?
{{ i1 }}get() {
{{ i2 }}if (!{{ flag }} && {{ map_var }}.containsKey({{ key }})) {
{{ i3 }}{{ assignment }}
{{ i3 }}{{ flag }} = true
{{ i2 }}}
{{ i2 }}return {{ field }}
{{ i1 }}}
{{ i1 }}set(v) {
{{ i2 }}{{ field }} = v
{{ i2 }}{{ flag }} = true
{{ i1 }}}
"""

ENUM_MAPPER = """\
{{ i0 }}object {{ name }}Mapper {
{{ i1 }}fun toStringValue(e: {{ name }}?): String? {
{{ i2 }}return when (e) {
{% for value in values %}
{{ i3 }}{{ name }}.{{ value.identifier }} -> {{ value.literal }}
{% endfor %}
{{ i3 }}else -> null
{{ i2 }}}
{{ i1 }}}

{{ i1 }}fun fromStringValue(s: String?): {{ name }}? {
{% for value in values %}
{{ i2 }}if (s == {{ value.literal }}) {
{{ i3 }}return {{ name }}.{{ value.identifier }}
{{ i2 }}}
{% endfor %}
{{ i2 }}return null
{{ i1 }}}
{{ i0 }}}
"""

TO_JSON = """\
{{ i0 }}{{ modifier }} fun toJson(): Map<String, Any?> {
{{ i1 }}val json = {{ initial }}
{% for prop in properties %}
{{ i1 }}if ({{ prop.flag }} || _apiMapResponse.containsKey({{ prop.key }})) {
{{ i2 }}json[{{ prop.key }}] = {{ prop.value }}
{{ i1 }}}
{% endfor %}
{{ i1 }}return json
{{ i0 }}}
"""

FROM_RESPONSE = """\
{{ i0 }}companion object {
{{ i1 }}fun fromResponse(apiRawResponse: Any?, apiResponseContentType: String?): {{ name }} {
{{ i2 }}val instance = {{ name }}()
{{ i2 }}instance._apiRawResponse = apiRawResponse
{{ i2 }}instance._apiMapResponse = emptyMap()
{{ i2 }}if (apiRawResponse is Map<*, *>) {
{{ i3 }}@Suppress("UNCHECKED_CAST")
{{ i3 }}instance._apiMapResponse = apiRawResponse as Map<String, Any?>
{{ i2 }}}
{{ i2 }}instance._apiResponseContentType = apiResponseContentType ?: ""
{{ i2 }}return instance
{{ i1 }}}
{{ i0 }}}
"""

METHOD = """\
{{ signature }} {
{{ i1 }}return this.{{ verb }}<{{ response }}>({{ path }}, {{ query }}, {{ body }})
{{ i0 }}}
"""

KOTLIN_TEMPLATES = {
    "file_header": FILE_HEADER,
    "methods_prologue": METHODS_PROLOGUE,
    "get_set": GET_SET,
    "enum_mapper": ENUM_MAPPER,
    "to_json": TO_JSON,
    "from_response": FROM_RESPONSE,
    "method": METHOD,
}
