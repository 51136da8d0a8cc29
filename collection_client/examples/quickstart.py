from collection_client import (
    ClientSettings, CollectionSchema, MetricType, VectorDBClient, configure_logging,
)

settings = ClientSettings()
configure_logging(settings.log_level)

schema = (
    CollectionSchema.builder("demo_vectors", 128)
    .with_segment_file_size(2048)
    .with_metric_type(MetricType.IP)
    .build()
)
print(schema)

with VectorDBClient(settings.to_config()) as cli:
    # 1) create
    if not cli.has_collection(schema.name):
        cli.create_collection(schema)

    # 2) inspect
    print("Collections:", cli.list_collections())
    print("Described:", cli.describe_collection(schema.name))
    print("Rows:", cli.count_rows(schema.name))

    # 3) cleanup
    cli.drop_collection(schema.name)
