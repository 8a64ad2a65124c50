"""In-memory Jinja templates for Dart output."""

METHODS_PROLOGUE = """\
{{ i0 }}// NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}import '../{{ package }}.dart';

{{ i0 }}class {{ sdk_class }} extends APIMethods {
{{ i1 }}{{ sdk_class }}(AuthSession authSession) : super(authSession);
"""

GET_SET = """\
{{ i0 }}{{ native }} get {{ name }} {
{{ i1 }}if (!{{ flag }} && {{ map_var }}.containsKey({{ key }})) {
{{ i2 }}{{ assignment }};
{{ i2 }}{{ flag }} = true;
{{ i1 }}}
{{ i1 }}return {{ field }};
{{ i0 }}}

{{ i0 }}set {{ name }}({{ native }} v) {
{{ i1 }}{{ field }} = v;
{{ i1 }}{{ flag }} = true;
{{ i0 }}}
"""

ENUM_MAPPER = """\
{{ i0 }}class {{ name }}Mapper {
{{ i1 }}static String toStringValue({{ name }} e) {
{{ i2 }}switch (e) {
{% for value in values %}
{{ i3 }}case {{ name }}.{{ value.identifier }}:
{{ i4 }}return {{ value.literal }};
{% endfor %}
{{ i3 }}default:
{{ i4 }}return null;
{{ i2 }}}
{{ i1 }}}

{{ i1 }}static {{ name }} fromStringValue(String s) {
{% for value in values %}
{{ i2 }}if (s == {{ value.literal }}) {
{{ i3 }}return {{ name }}.{{ value.identifier }};
{{ i2 }}}
{% endfor %}
{{ i2 }}return null;
{{ i1 }}}
{{ i0 }}}
"""

TO_JSON = """\
{% if override %}
{{ i0 }}@override
{% endif %}
{{ i0 }}Map toJson() {
{{ i1 }}var json = {{ initial }};
{% for prop in properties %}
{{ i1 }}if ({{ prop.flag }} || _apiMapResponse.containsKey({{ prop.key }})) {
{{ i2 }}json[{{ prop.key }}] = {{ prop.value }};
{{ i1 }}}
{% endfor %}
{{ i1 }}return json;
{{ i0 }}}
"""

FROM_RESPONSE = """\
{{ i0 }}{{ name }}.fromResponse(Object apiRawResponse, String apiResponseContentType) {
{{ i1 }}_apiRawResponse = apiRawResponse;
{{ i1 }}_apiMapResponse = {};
{{ i1 }}if (apiRawResponse is Map) {
{{ i2 }}_apiMapResponse = apiRawResponse;
{{ i1 }}}
{{ i1 }}_apiResponseContentType = apiResponseContentType ?? '';
{{ i0 }}}
"""

METHOD = """\
{{ i0 }}{{ signature }} async {
{{ i1 }}dynamic responseHandler(dynamic json, String contentType) {
{{ i2 }}return {{ conversion }};
{{ i1 }}}
{{ i1 }}return {{ verb }}(responseHandler, {{ path }}, {{ query }}, {{ body }});
{{ i0 }}}
"""

DART_TEMPLATES = {
    "methods_prologue": METHODS_PROLOGUE,
    "get_set": GET_SET,
    "enum_mapper": ENUM_MAPPER,
    "to_json": TO_JSON,
    "from_response": FROM_RESPONSE,
    "method": METHOD,
}
