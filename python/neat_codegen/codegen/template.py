'''Text templates of the generated reflection document.

``DOCUMENT`` is spliced with ``str.replace`` on its placeholders so that a
custom document may contain C++ braces verbatim. The fragment templates use
``str.format``.
'''

DEFAULT_RUNTIME_NAMESPACE = 'Neat'
DEFAULT_PRIVATE_HOOK = 'reflect_private_members'

MODULE_NAME = '{module_name}'
REGISTRATION_BODY = '{registration_body}'
RUNTIME_NAMESPACE = '{runtime_namespace}'
PRIVATE_HOOK = '{private_hook}'

DOCUMENT = '''\
// ================================================================================
//                      AUTO GENERATED REFLECTION DATA FILE
//                         Generated by: neat_codegen
//
//       Don't modify this file, it will be overwritten when a change is made.
// ================================================================================

#include "Neat/Reflection.h"
#include "Neat/TemplateTypeId.h"

import {module_name};


namespace {runtime_namespace}
{
	static void {private_hook}()
	{
{registration_body}
	}

	namespace Detail
	{
		struct Register{ Register(){ {runtime_namespace}::{private_hook}(); } };
		static Register neat_reflection_data_initialiser{ };
	}
}
'''

REGISTRATION = '''\
		// {identifier}
		add_type({{ "{name}", get_id<{name}>(),
			{{ {bases} }},
			{{ {fields} }},
			{{ {methods} }}
		}});
'''

BASE = 'BaseClass{{ get_id<{type}>(), {access} }}, '

FIELD = 'Field::create<{owner}, {type}, &{owner}::{name}>("{name}", {access}), '

METHOD = 'Method::create<&{owner}::{name}, {owner}, {return_type}{parameters}>("{name}", {access}), '

ACCESS = '{runtime_namespace}::Access::{access}'
