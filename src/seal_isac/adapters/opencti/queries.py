"""GraphQL documents sent to OpenCTI."""

from __future__ import annotations

from typing import Final

OBSERVABLE_FIELDS: Final = """
    id
    standard_id
    entity_type
    observable_value
    objectLabel { id value }
"""

INDICATOR_FIELDS: Final = """
    id
    standard_id
    name
    pattern
    valid_from
    valid_until
    x_opencti_score
    revoked
"""

GET_OBSERVABLE: Final = f"""
query StixCyberObservable($id: String!) {{
  stixCyberObservable(id: $id) {{ {OBSERVABLE_FIELDS} }}
}}
"""

CREATE_OBSERVABLE: Final = f"""
mutation StixCyberObservableAdd(
  $type: String!
  $createdBy: String
  $objectMarking: [String]
  $objectLabel: [String]
  $x_opencti_score: Int
  $DomainName: DomainNameAddInput
  $IPv4Addr: IPv4AddrAddInput
  $IPv6Addr: IPv6AddrAddInput
  $Url: UrlAddInput
) {{
  stixCyberObservableAdd(
    type: $type
    createdBy: $createdBy
    objectMarking: $objectMarking
    objectLabel: $objectLabel
    x_opencti_score: $x_opencti_score
    DomainName: $DomainName
    IPv4Addr: $IPv4Addr
    IPv6Addr: $IPv6Addr
    Url: $Url
  ) {{ {OBSERVABLE_FIELDS} }}
}}
"""

ADD_LABEL: Final = """
mutation StixCyberObservableLabelAdd($id: ID!, $input: StixRefRelationshipAddInput!) {
  stixCyberObservableEdit(id: $id) {
    relationAdd(input: $input) {
      from { ... on StixCyberObservable { objectLabel { id value } } }
    }
  }
}
"""

DELETE_LABEL: Final = """
mutation StixCyberObservableLabelDelete($id: ID!, $toId: StixRef!, $relationship_type: String!) {
  stixCyberObservableEdit(id: $id) {
    relationDelete(toId: $toId, relationship_type: $relationship_type) {
      objectLabel { id value }
    }
  }
}
"""

GET_INDICATOR: Final = f"""
query Indicator($id: String!) {{
  indicator(id: $id) {{ {INDICATOR_FIELDS} }}
}}
"""

CREATE_INDICATOR: Final = f"""
mutation IndicatorAdd($input: IndicatorAddInput!) {{
  indicatorAdd(input: $input) {{ {INDICATOR_FIELDS} }}
}}
"""

EDIT_INDICATOR: Final = f"""
mutation IndicatorFieldPatch($id: ID!, $input: [EditInput]!) {{
  indicatorFieldPatch(id: $id, input: $input) {{ {INDICATOR_FIELDS} }}
}}
"""

CREATE_RELATIONSHIP: Final = """
mutation StixCoreRelationshipAdd($input: StixCoreRelationshipAddInput!) {
  stixCoreRelationshipAdd(input: $input) { id }
}
"""
