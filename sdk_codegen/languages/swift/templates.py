"""In-memory Jinja templates for Swift output."""

FILE_HEADER = """\
{{ i0 }}// NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}import Foundation
"""

METHODS_PROLOGUE = FILE_HEADER + """
{{ i0 }}open class {{ sdk_class }}: APIMethods {
"""

GET_SET = """\
{{ i0 }}public var {{ name }}: {{ native }}? {
{{ i1 }}get {
{{ i2 }}if !{{ flag }}, {{ map_var }}.keys.contains({{ key }}) {
{{ i3 }}{{ assignment }}
{{ i3 }}{{ flag }} = true
{{ i2 }}}
{{ i2 }}return {{ field }}
{{ i1 }}}
{{ i1 }}set {
{{ i2 }}{{ field }} = newValue
{{ i2 }}{{ flag }} = true
{{ i1 }}}
{{ i0 }}}
"""

ENUM_MAPPER = """\
{{ i0 }}public enum {{ name }}Mapper {
{{ i1 }}public static func toStringValue(_ e: {{ name }}?) -> String? {
{{ i2 }}switch e {
{% for value in values %}
{{ i2 }}case .some(.{{ value.identifier }}):
{{ i3 }}return {{ value.literal }}
{% endfor %}
{{ i2 }}default:
{{ i3 }}return nil
{{ i2 }}}
{{ i1 }}}

{{ i1 }}public static func fromStringValue(_ s: String?) -> {{ name }}? {
{% for value in values %}
{{ i2 }}if s == {{ value.literal }} {
{{ i3 }}return .{{ value.identifier }}
{{ i2 }}}
{% endfor %}
{{ i2 }}return nil
{{ i1 }}}
{{ i0 }}}
"""

TO_JSON = """\
{{ i0 }}public {{ modifier }}func toJson() -> [String: Any] {
{{ i1 }}var json: [String: Any] = {{ initial }}
{% for prop in properties %}
{{ i1 }}if {{ prop.flag }} || _apiMapResponse.keys.contains({{ prop.key }}) {
{{ i2 }}json[{{ prop.key }}] = {{ prop.value }}
{{ i1 }}}
{% endfor %}
{{ i1 }}return json
{{ i0 }}}
"""

FROM_RESPONSE = """\
{{ i0 }}public {{ modifier }}class func fromResponse(_ apiRawResponse: Any?, _ apiResponseContentType: String?) -> {{ name }} {
{{ i1 }}let instance = {{ name }}()
{{ i1 }}instance._apiRawResponse = apiRawResponse
{{ i1 }}instance._apiMapResponse = [:]
{{ i1 }}if let map = apiRawResponse as? [String: Any] {
{{ i2 }}instance._apiMapResponse = map
{{ i1 }}}
{{ i1 }}instance._apiResponseContentType = apiResponseContentType ?? ""
{{ i1 }}return instance
{{ i0 }}}
"""

METHOD = """\
{{ signature }} {
{{ i1 }}return self.{{ verb }}({{ path }}, {{ query }}, {{ body }})
{{ i0 }}}
"""

SWIFT_TEMPLATES = {
    "file_header": FILE_HEADER,
    "methods_prologue": METHODS_PROLOGUE,
    "get_set": GET_SET,
    "enum_mapper": ENUM_MAPPER,
    "to_json": TO_JSON,
    "from_response": FROM_RESPONSE,
    "method": METHOD,
}
