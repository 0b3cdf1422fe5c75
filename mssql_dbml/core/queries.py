"""
Catalog queries for SQL Server metadata.
`{schema_filter}` is replaced with a fixed clause built by db_connector.schema_clause;
schema names themselves are always passed as bound parameters.
"""

COLUMNS_QUERY = """
SELECT
    t.TABLE_SCHEMA,
    t.TABLE_NAME,
    c.COLUMN_NAME,
    c.DATA_TYPE,
    c.CHARACTER_MAXIMUM_LENGTH,
    c.NUMERIC_PRECISION,
    c.NUMERIC_SCALE,
    c.IS_NULLABLE,
    c.COLUMN_DEFAULT,
    CASE WHEN pk.COLUMN_NAME IS NOT NULL THEN 1 ELSE 0 END AS IS_PK,
    CASE WHEN ic.is_identity = 1 THEN 1 ELSE 0 END AS IS_IDENTITY,
    CASE WHEN uq.COLUMN_NAME IS NOT NULL THEN 1 ELSE 0 END AS IS_UNIQUE
FROM INFORMATION_SCHEMA.TABLES t
JOIN INFORMATION_SCHEMA.COLUMNS c
    ON t.TABLE_NAME = c.TABLE_NAME
    AND t.TABLE_SCHEMA = c.TABLE_SCHEMA
LEFT JOIN (
    SELECT DISTINCT ku.TABLE_SCHEMA, ku.TABLE_NAME, ku.COLUMN_NAME
    FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS tc
    JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE ku
        ON tc.CONSTRAINT_NAME = ku.CONSTRAINT_NAME
        AND tc.TABLE_SCHEMA = ku.TABLE_SCHEMA
    WHERE tc.CONSTRAINT_TYPE = 'PRIMARY KEY'
) pk ON c.TABLE_NAME = pk.TABLE_NAME
    AND c.COLUMN_NAME = pk.COLUMN_NAME
    AND c.TABLE_SCHEMA = pk.TABLE_SCHEMA
LEFT JOIN (
    SELECT DISTINCT ku.TABLE_SCHEMA, ku.TABLE_NAME, ku.COLUMN_NAME
    FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS tc
    JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE ku
        ON tc.CONSTRAINT_NAME = ku.CONSTRAINT_NAME
        AND tc.TABLE_SCHEMA = ku.TABLE_SCHEMA
    WHERE tc.CONSTRAINT_TYPE = 'UNIQUE'
) uq ON c.TABLE_NAME = uq.TABLE_NAME
    AND c.COLUMN_NAME = uq.COLUMN_NAME
    AND c.TABLE_SCHEMA = uq.TABLE_SCHEMA
LEFT JOIN sys.columns ic
    ON ic.object_id = OBJECT_ID(QUOTENAME(t.TABLE_SCHEMA) + '.' + QUOTENAME(t.TABLE_NAME))
    AND ic.name = c.COLUMN_NAME
WHERE t.TABLE_TYPE = 'BASE TABLE'
    {schema_filter}
ORDER BY t.TABLE_SCHEMA, t.TABLE_NAME, c.ORDINAL_POSITION
"""

FOREIGN_KEYS_QUERY = """
SELECT
    OBJECT_SCHEMA_NAME(fk.parent_object_id) AS FK_SCHEMA,
    OBJECT_NAME(fk.parent_object_id) AS FK_TABLE,
    COL_NAME(fkc.parent_object_id, fkc.parent_column_id) AS FK_COL,
    OBJECT_SCHEMA_NAME(fk.referenced_object_id) AS PK_SCHEMA,
    OBJECT_NAME(fk.referenced_object_id) AS PK_TABLE,
    COL_NAME(fkc.referenced_object_id, fkc.referenced_column_id) AS PK_COL,
    fk.delete_referential_action_desc AS DELETE_ACTION,
    fk.update_referential_action_desc AS UPDATE_ACTION
FROM sys.foreign_keys fk
JOIN sys.foreign_key_columns fkc
    ON fk.object_id = fkc.constraint_object_id
{schema_filter}
ORDER BY fk.name
"""
