"""In-memory Jinja templates for C# output."""

FILE_HEADER = """\
{{ i0 }}// NOTE: Do not edit this file generated by {{ product }} SDK Codegen for API {{ api_version }}
{{ i0 }}using System;
{{ i0 }}using System.Collections.Generic;
{{ i0 }}using System.Linq;
{{ i0 }}using System.Threading.Tasks;

{{ i0 }}namespace {{ package }};
"""

METHODS_PROLOGUE = FILE_HEADER + """
{{ i0 }}public class {{ sdk_class }} : ApiMethods
{{ i0 }}{
{{ i1 }}public {{ sdk_class }}(IAuthSession authSession) : base(authSession, {{ api_version_literal }}) { }
"""

GET_SET = """\
{{ i0 }}public {{ native }} {{ public_name }}
{{ i0 }}{
{{ i1 }}get
{{ i1 }}{
{{ i2 }}if (!{{ flag }} && {{ map_var }}.ContainsKey({{ key }}))
{{ i2 }}{
{{ i3 }}{{ assignment }};
{{ i3 }}{{ flag }} = true;
{{ i2 }}}
{{ i2 }}return {{ field }};
{{ i1 }}}
{{ i1 }}set
{{ i1 }}{
{{ i2 }}{{ field }} = value;
{{ i2 }}{{ flag }} = true;
{{ i1 }}}
{{ i0 }}}
"""

ENUM_MAPPER = """\
{{ i0 }}public static class {{ name }}Mapper
{{ i0 }}{
{{ i1 }}public static string ToStringValue({{ name }}? e)
{{ i1 }}{
{{ i2 }}switch (e)
{{ i2 }}{
{% for value in values %}
{{ i3 }}case {{ name }}.{{ value.identifier }}:
{{ i4 }}return {{ value.literal }};
{% endfor %}
{{ i3 }}default:
{{ i4 }}return null;
{{ i2 }}}
{{ i1 }}}

{{ i1 }}public static {{ name }}? FromStringValue(string s)
{{ i1 }}{
{% for value in values %}
{{ i2 }}if (s == {{ value.literal }})
{{ i2 }}{
{{ i3 }}return {{ name }}.{{ value.identifier }};
{{ i2 }}}
{% endfor %}
{{ i2 }}return null;
{{ i1 }}}
{{ i0 }}}
"""

TO_JSON = """\
{{ i0 }}public {{ modifier }} IDictionary<string, object> ToJson()
{{ i0 }}{
{{ i1 }}var json = {{ initial }};
{% for prop in properties %}
{{ i1 }}if ({{ prop.flag }} || _apiMapResponse.ContainsKey({{ prop.key }}))
{{ i1 }}{
{{ i2 }}json[{{ prop.key }}] = {{ prop.value }};
{{ i1 }}}
{% endfor %}
{{ i1 }}return json;
{{ i0 }}}
"""

FROM_RESPONSE = """\
{{ i0 }}public static {{ hiding }}{{ name }} FromResponse(object apiRawResponse, string apiResponseContentType)
{{ i0 }}{
{{ i1 }}var instance = new {{ name }}();
{{ i1 }}instance._apiRawResponse = apiRawResponse;
{{ i1 }}instance._apiMapResponse = new Dictionary<string, object>();
{{ i1 }}if (apiRawResponse is IDictionary<string, object> map)
{{ i1 }}{
{{ i2 }}instance._apiMapResponse = map;
{{ i1 }}}
{{ i1 }}instance._apiResponseContentType = apiResponseContentType ?? "";
{{ i1 }}return instance;
{{ i0 }}}
"""

METHOD = """\
{{ signature }}
{{ i0 }}{
{{ i1 }}return await AuthRequest<{{ response }}>(HttpMethod.{{ verb }}, {{ path }}, {{ query }}, {{ body }});
{{ i0 }}}
"""

CSHARP_TEMPLATES = {
    "file_header": FILE_HEADER,
    "methods_prologue": METHODS_PROLOGUE,
    "get_set": GET_SET,
    "enum_mapper": ENUM_MAPPER,
    "to_json": TO_JSON,
    "from_response": FROM_RESPONSE,
    "method": METHOD,
}
