"""In-memory Jinja templates for TypeScript output."""

METHODS_PROLOGUE = """\
{{ i0 }}// NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}import type { IAuthSession, SDKResponse } from '@{{ package }}/sdk-rtl'
{{ i0 }}import { APIMethods, encodeParam } from '@{{ package }}/sdk-rtl'
{% if type_names %}
{{ i0 }}import {
{% for type_name in type_names %}
{{ i1 }}{{ type_name }},
{% endfor %}
{{ i0 }}} from './models'
{% endif %}

{{ i0 }}export class {{ sdk_class }} extends APIMethods {
{{ i1 }}static readonly ApiVersion = {{ api_version_literal }}

{{ i1 }}constructor(authSession: IAuthSession) {
{{ i2 }}super(authSession, {{ api_version_literal }})
{{ i1 }}}
"""

GET_SET = """\
{{ i0 }}get {{ name }}(): {{ native }} | undefined {
{{ i1 }}if (!this.{{ flag }} && {{ key }} in this._apiMapResponse) {
{{ i2 }}{{ assignment }}
{{ i2 }}this.{{ flag }} = true
{{ i1 }}}
{{ i1 }}return this.{{ field }}
{{ i0 }}}

{{ i0 }}set {{ name }}(v: {{ native }} | undefined) {
{{ i1 }}this.{{ field }} = v
{{ i1 }}this.{{ flag }} = true
{{ i0 }}}
"""

ENUM_MAPPER = """\
{{ i0 }}export class {{ name }}Mapper {
{{ i1 }}static toStringValue(e?: {{ name }}): string | undefined {
{{ i2 }}switch (e) {
{% for value in values %}
{{ i3 }}case {{ name }}.{{ value.identifier }}:
{{ i4 }}return {{ value.literal }}
{% endfor %}
{{ i3 }}default:
{{ i4 }}return undefined
{{ i2 }}}
{{ i1 }}}

{{ i1 }}static fromStringValue(s?: string): {{ name }} | undefined {
{% for value in values %}
{{ i2 }}if (s === {{ value.literal }}) {
{{ i3 }}return {{ name }}.{{ value.identifier }}
{{ i2 }}}
{% endfor %}
{{ i2 }}return undefined
{{ i1 }}}
{{ i0 }}}
"""

TO_JSON = """\
{{ i0 }}toJson(): Record<string, unknown> {
{{ i1 }}const json: Record<string, unknown> = {{ initial }}
{% for prop in properties %}
{{ i1 }}if (this.{{ prop.flag }} || {{ prop.key }} in this._apiMapResponse) {
{{ i2 }}json[{{ prop.key }}] = {{ prop.value }}
{{ i1 }}}
{% endfor %}
{{ i1 }}return json
{{ i0 }}}
"""

FROM_RESPONSE = """\
{{ i0 }}static fromResponse(
{{ i1 }}apiRawResponse: unknown,
{{ i1 }}apiResponseContentType?: string
{{ i0 }}): {{ name }} {
{{ i1 }}const instance = new {{ name }}()
{{ i1 }}instance._apiRawResponse = apiRawResponse
{{ i1 }}instance._apiMapResponse = {}
{{ i1 }}if (
{{ i2 }}apiRawResponse !== null &&
{{ i2 }}typeof apiRawResponse === 'object' &&
{{ i2 }}!Array.isArray(apiRawResponse)
{{ i1 }}) {
{{ i2 }}instance._apiMapResponse = apiRawResponse as Record<string, any>
{{ i1 }}}
{{ i1 }}instance._apiResponseContentType = apiResponseContentType ?? ''
{{ i1 }}return instance
{{ i0 }}}
"""

METHOD = """\
{{ signature }} {
{{ i1 }}return this.{{ verb }}(
{{ i2 }}(json: any, contentType: string) => {{ conversion }},
{{ i2 }}{{ path }},
{{ i2 }}{{ query }},
{{ i2 }}{{ body }}
{{ i1 }})
{{ i0 }}}
"""

TYPESCRIPT_TEMPLATES = {
    "methods_prologue": METHODS_PROLOGUE,
    "get_set": GET_SET,
    "enum_mapper": ENUM_MAPPER,
    "to_json": TO_JSON,
    "from_response": FROM_RESPONSE,
    "method": METHOD,
}
